from contriboard.extensions import db
from datetime import datetime
import uuid

def gen_uuid(prefix=None):
    uid = str(uuid.uuid4())
    return f"{prefix}-{uid}" if prefix else uid

class Profile(db.Model):
    __tablename__ = "profiles"

    id = db.Column(db.String(50), primary_key=True, default=lambda: gen_uuid("usr"))
    github_username = db.Column(db.String(255), nullable=False, index=True)
    github_id = db.Column(db.String(50), unique=True, nullable=True, index=True)
    display_username = db.Column(db.String(255), nullable=True)
    avatar_url = db.Column(db.String(1024), nullable=True)
    website_url = db.Column(db.String(1024), nullable=True)
    other_urls = db.Column(db.JSON, default=list)
    # legacy full-history series, only read by the backfill
    contributions_data = db.Column(db.JSON(none_as_null=True), nullable=True)
    total_contributions = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    last_updated = db.Column(db.DateTime, nullable=True)

    @property
    def display_name(self):
        return self.display_username or self.github_username

    def to_dict(self):
        return {
            "id": self.id,
            "github_username": self.github_username,
            "github_id": self.github_id,
            "display_username": self.display_username,
            "display_name": self.display_name,
            "avatar_url": self.avatar_url,
            "website_url": self.website_url,
            "other_urls": self.other_urls or [],
            "total_contributions": self.total_contributions or 0,
            "created_at": self.created_at.isoformat() + "Z" if self.created_at else None,
            "last_updated": self.last_updated.isoformat() + "Z" if self.last_updated else None,
        }
