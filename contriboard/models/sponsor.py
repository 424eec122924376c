from contriboard.extensions import db
from datetime import datetime
from urllib.parse import urlparse
import uuid

FAVICON_SERVICE = "https://www.google.com/s2/favicons?domain={domain}&sz=64"

class Sponsor(db.Model):
    __tablename__ = "sponsors"

    id = db.Column(db.String(50), primary_key=True, default=lambda: f"spn_{uuid.uuid4().hex[:12]}")
    email = db.Column(db.String(255), nullable=False)
    company_name = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=True)
    website_url = db.Column(db.String(1024), nullable=True)
    status = db.Column(db.String(50), default="pending", index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def favicon_url(self):
        if not self.website_url:
            return None
        domain = urlparse(self.website_url).hostname
        if not domain:
            return None
        return FAVICON_SERVICE.format(domain=domain)

