from ..extensions import db


class Card(db.Model):
    __tablename__ = "cards"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    transactions = db.relationship("Transaction", backref="card", lazy=True)

    def to_dict(self):
        return {"id": self.id, "name": self.name, "is_active": self.is_active}
