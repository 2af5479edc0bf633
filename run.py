import logging

from app import create_app, db

app = create_app()

if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)

    # Local development only: make sure the SQLite schema exists.
    with app.app_context():
        db.create_all()

    app.run(debug=True)
