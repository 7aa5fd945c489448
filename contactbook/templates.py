# -------------------------------------------------------------
# TEMPLATES – inline Jinja strings rendered with
# render_template_string, Bootstrap for layout.
# -------------------------------------------------------------
PAGE_HEAD = """
<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.2/dist/css/bootstrap.min.css" rel="stylesheet">
  </head>
  <body class="bg-light">
    <nav class="navbar navbar-expand-lg navbar-dark bg-primary mb-4">
      <div class="container-fluid">
        <a class="navbar-brand" href="{{ url_for('contacts.list_contacts') }}">Contact Book</a>
        <div class="navbar-nav">
          <a class="nav-link" href="{{ url_for('contacts.list_contacts') }}">Contacts</a>
          <a class="nav-link" href="{{ url_for('contacts.new_contact') }}">New Contact</a>
        </div>
      </div>
    </nav>
    <div class="container">
      {% with messages = get_flashed_messages() %}
        {% if messages %}
          <div class="alert alert-info">
            {% for m in messages %}<div>{{ m }}</div>{% endfor %}
          </div>
        {% endif %}
      {% endwith %}
"""

PAGE_FOOT = """
    </div>
  </body>
</html>
"""

CONTACTS_TEMPLATE = (
    PAGE_HEAD
    + """
      <div class="d-flex justify-content-between align-items-center mb-3">
        <h1 class="h3 mb-0">Contacts</h1>
        <a class="btn btn-primary" href="{{ url_for('contacts.new_contact') }}">+ New Contact</a>
      </div>

      <table class="table table-striped table-hover align-middle bg-white shadow-sm">
        <thead class="table-light">
          <tr>
            <th>Name</th>
            <th>Email</th>
            <th>Created</th>
            <th></th>
          </tr>
        </thead>
        <tbody>
          {% for c in contacts %}
          <tr>
            <td><a href="{{ url_for('contacts.show_contact', contact_id=c.id) }}"><strong>{{ c.first_name }} {{ c.last_name }}</strong></a></td>
            <td>{{ c.email_address }}</td>
            <td class="small">{{ c.created_at|localtime }}</td>
            <td class="text-end">
              <a class="btn btn-sm btn-outline-secondary" href="{{ url_for('contacts.edit_contact', contact_id=c.id) }}">Edit</a>
              <form method="post" action="{{ url_for('contacts.delete_contact', contact_id=c.id) }}"
                    style="display:inline-block" onsubmit="return confirm('Delete this contact?');">
                <button class="btn btn-sm btn-outline-danger">Delete</button>
              </form>
            </td>
          </tr>
          {% else %}
          <tr><td colspan="4" class="text-center text-muted">No contacts yet.</td></tr>
          {% endfor %}
        </tbody>
      </table>
"""
    + PAGE_FOOT
)

# Shared by create and edit. 'contact' is None on the create form.
CONTACT_FORM_TEMPLATE = (
    PAGE_HEAD
    + """
      <h1 class="h3 mb-3">
        {% if contact %}Edit Contact{% else %}New Contact{% endif %}
      </h1>

      {% if error_message %}
        <div class="alert alert-danger">{{ error_message }}</div>
      {% endif %}

      <form method="post" class="card p-3 shadow-sm bg-white"
            action="{% if contact %}{{ url_for('contacts.update_contact', contact_id=contact.id) }}{% else %}{{ url_for('contacts.create_contact') }}{% endif %}">
        <div class="row mb-3">
          <div class="col-md-6">
            <label class="form-label">First name</label>
            <input class="form-control" type="text" name="firstName" value="{{ values.firstName }}" required>
          </div>
          <div class="col-md-6">
            <label class="form-label">Last name</label>
            <input class="form-control" type="text" name="lastName" value="{{ values.lastName }}" required>
          </div>
        </div>
        <div class="mb-3">
          <label class="form-label">Email address</label>
          <input class="form-control" type="email" name="emailAddress" value="{{ values.emailAddress }}">
        </div>
        <div class="mb-3">
          <label class="form-label">Notes</label>
          <textarea class="form-control" name="notes" rows="4">{{ values.notes }}</textarea>
          <div class="form-text">Allowed markup: &lt;b&gt;, &lt;i&gt;, &lt;em&gt;, &lt;strong&gt;, &lt;a href&gt;.</div>
        </div>

        <div class="d-flex justify-content-between">
          <a class="btn btn-outline-secondary" href="{{ url_for('contacts.list_contacts') }}">Cancel</a>
          <button class="btn btn-success" type="submit">
            {% if contact %}Save changes{% else %}Create contact{% endif %}
          </button>
        </div>
      </form>
"""
    + PAGE_FOOT
)

# Notes are rendered unescaped: only allow-listed markup is ever stored.
CONTACT_DETAIL_TEMPLATE = (
    PAGE_HEAD
    + """
      <div class="card shadow-sm bg-white">
        <div class="card-header d-flex justify-content-between align-items-center">
          <h1 class="h4 mb-0">{{ contact.first_name }} {{ contact.last_name }}</h1>
          <div>
            <a class="btn btn-sm btn-outline-secondary" href="{{ url_for('contacts.edit_contact', contact_id=contact.id) }}">Edit</a>
            <form method="post" action="{{ url_for('contacts.delete_contact', contact_id=contact.id) }}"
                  style="display:inline-block" onsubmit="return confirm('Delete this contact?');">
              <button class="btn btn-sm btn-outline-danger">Delete</button>
            </form>
          </div>
        </div>
        <div class="card-body">
          <dl class="row mb-0">
            <dt class="col-sm-3">Email</dt>
            <dd class="col-sm-9">{{ contact.email_address or '—' }}</dd>
            <dt class="col-sm-3">Notes</dt>
            <dd class="col-sm-9">{{ contact.notes|safe }}</dd>
            <dt class="col-sm-3">Created</dt>
            <dd class="col-sm-9">{{ contact.created_at|localtime }}</dd>
            <dt class="col-sm-3">Updated</dt>
            <dd class="col-sm-9">{{ contact.updated_at|localtime }}</dd>
          </dl>
        </div>
      </div>
"""
    + PAGE_FOOT
)

ERROR_TEMPLATE = (
    PAGE_HEAD
    + """
      <h1 class="h3 mb-3">{{ status }}</h1>
      <p>{{ message }}</p>
      <a class="btn btn-outline-secondary" href="{{ url_for('contacts.list_contacts') }}">Back to contacts</a>
"""
    + PAGE_FOOT
)
