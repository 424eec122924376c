from contriboard.extensions import db
from datetime import datetime

class DailyContribution(db.Model):
    __tablename__ = "daily_contributions"
    __table_args__ = (
        db.UniqueConstraint("user_id", "date", name="uq_daily_contributions_user_date"),
        db.CheckConstraint("count >= 0", name="ck_daily_contributions_count_non_negative"),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id = db.Column(db.String(50), db.ForeignKey("profiles.id"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False, index=True)
    count = db.Column(db.Integer, nullable=False, default=0)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow)

