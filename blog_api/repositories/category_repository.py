from blog_api.db import db
from blog_api.models.category_model import Category


def get_by_name(name: str):
    return Category.query.filter_by(name=name).first()


def create_category(name: str):
    category = Category(name=name)
    db.session.add(category)
    db.session.flush()
    return category
