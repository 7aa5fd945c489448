from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template_string,
    request,
    url_for,
)

from contactbook import handlers
from contactbook.errors import ValidationError
from contactbook.templates import (
    CONTACT_DETAIL_TEMPLATE,
    CONTACT_FORM_TEMPLATE,
    CONTACTS_TEMPLATE,
)

bp = Blueprint("contacts", __name__)

EMPTY_FORM = {"firstName": "", "lastName": "", "emailAddress": "", "notes": ""}


def get_store():
    return current_app.extensions["contact_store"]


def _submitted_fields():
    """Form fields, or the same keys from a JSON body."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form


def _form_values(data) -> dict:
    values = {}
    for key in EMPTY_FORM:
        value = data.get(key)
        values[key] = value if isinstance(value, str) else ""
    return values


@bp.app_template_filter("localtime")
def localtime(value):
    """Stored UTC timestamp -> readable local time for display."""
    try:
        moment = handlers.parse_timestamp(value)
    except (TypeError, ValueError):
        return value
    return moment.astimezone().strftime("%Y-%m-%d %H:%M:%S")


@bp.route("/")
def index():
    return redirect(url_for("contacts.list_contacts"))


@bp.route("/contacts")
def list_contacts():
    contacts = handlers.list_contacts(get_store())
    return render_template_string(CONTACTS_TEMPLATE, title="Contacts", contacts=contacts)


@bp.route("/contacts/new")
def new_contact():
    return render_template_string(
        CONTACT_FORM_TEMPLATE,
        title="New Contact",
        contact=None,
        values=EMPTY_FORM,
        error_message=None,
    )


@bp.route("/contacts", methods=["POST"])
def create_contact():
    data = _submitted_fields()
    try:
        handlers.create_contact(get_store(), data)
    except ValidationError as exc:
        # Re-present the form with what the user typed; nothing was stored.
        return render_template_string(
            CONTACT_FORM_TEMPLATE,
            title="New Contact",
            contact=None,
            values=_form_values(data),
            error_message=exc.message,
        )
    flash("Contact created.")
    return redirect(url_for("contacts.list_contacts"))


@bp.route("/contacts/<contact_id>")
def show_contact(contact_id):
    contact = handlers.get_contact(get_store(), contact_id)
    return render_template_string(
        CONTACT_DETAIL_TEMPLATE,
        title=f"{contact.first_name} {contact.last_name}",
        contact=contact,
    )


@bp.route("/contacts/<contact_id>/edit")
def edit_contact(contact_id):
    contact = handlers.get_contact(get_store(), contact_id)
    return render_template_string(
        CONTACT_FORM_TEMPLATE,
        title="Edit Contact",
        contact=contact,
        values=contact.form_values(),
        error_message=None,
    )


@bp.route("/contacts/<contact_id>", methods=["POST"])
def update_contact(contact_id):
    # HTML forms can't send DELETE; honour a _method=DELETE override.
    if (request.form.get("_method") or "").upper() == "DELETE":
        return delete_contact(contact_id)

    data = _submitted_fields()
    try:
        handlers.update_contact(get_store(), contact_id, data)
    except ValidationError as exc:
        return render_template_string(
            CONTACT_FORM_TEMPLATE,
            title="Edit Contact",
            contact={"id": contact_id},
            values=_form_values(data),
            error_message=exc.message,
        )
    flash("Contact updated.")
    return redirect(url_for("contacts.show_contact", contact_id=contact_id))


@bp.route("/contacts/<contact_id>/delete", methods=["POST"])
def delete_contact(contact_id):
    handlers.delete_contact(get_store(), contact_id)
    flash("Contact deleted.")
    return redirect(url_for("contacts.list_contacts"))
