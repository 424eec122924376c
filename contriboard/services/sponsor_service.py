from contriboard.models.sponsor import Sponsor

ACTIVE_STATUS = "active"


def list_active_sponsors(session):
    return (
        session.query(Sponsor)
        .filter(Sponsor.status == ACTIVE_STATUS)
        .order_by(Sponsor.created_at.asc(), Sponsor.id.asc())
        .all()
    )
