from blog_api.db import db


class UserJWT(db.Model):
    __tablename__ = "user_jwts"

    # tokens carry the email claim (up to 255 chars), roughly 700 chars encoded
    token = db.Column(db.String(2048), primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
