from datetime import datetime
from ..extensions import db


class Transaction(db.Model):
    __tablename__ = "transactions"
    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True)
    card_id = db.Column(db.Integer, db.ForeignKey("cards.id", ondelete="SET NULL"), index=True)  # None = cash
    transaction_date = db.Column(db.Date, nullable=False, index=True)
    amount = db.Column(db.Integer, nullable=False)  # cents, positive = income
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    @property
    def is_income(self):
        return self.amount > 0

    def to_dict(self):
        return {
            "id": self.id,
            "category_id": self.category_id,
            "card_id": self.card_id,
            "transaction_date": self.transaction_date.isoformat(),
            "amount": self.amount,
            "notes": self.notes,
        }
