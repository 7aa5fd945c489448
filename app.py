from contactbook import create_app

# =============================================================
# Contact Book
#   gunicorn / App Engine entry point: app:app
#   The SQLite schema is created on the store's first connection.
# =============================================================
app = create_app()

if __name__ == "__main__":
    # Local dev only
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=True)
