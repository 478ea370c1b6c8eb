from ..extensions import db


class MonthlyBudget(db.Model):
    __tablename__ = "monthly_budgets"
    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id", ondelete="CASCADE"), nullable=False)
    month = db.Column(db.String(7), nullable=False, index=True)  # YYYY-MM
    limit_amount = db.Column(db.Integer, nullable=False, default=0)  # cents

    __table_args__ = (
        db.UniqueConstraint("category_id", "month", name="uq_category_month"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "category_id": self.category_id,
            "month": self.month,
            "limit_amount": self.limit_amount,
        }
