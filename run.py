from blog_api import create_app
from blog_api.db import db


app = create_app()


if __name__ == "__main__":
    try:
        app.run(host=app.config["HOST"], port=app.config["PORT"])
    finally:
        with app.app_context():
            db.engine.dispose()
