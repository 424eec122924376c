import argparse

from contriboard.main import create_app
from contriboard.extensions import db
from contriboard.services.backfill_service import (
    backfill_daily_contributions,
    normalize_legacy_website_urls,
)

# -------------------------------------------------------------------
# One-time migration: legacy contributions_data -> daily_contributions
# -------------------------------------------------------------------

def main(argv=None):
    parser = argparse.ArgumentParser(description="Backfill daily contributions from legacy profile data")
    parser.add_argument("--normalize-urls", action="store_true",
                        help="also move JSON-encoded website_url arrays into other_urls")
    parser.add_argument("--config", default=None, help="configuration name (development, production)")
    args = parser.parse_args(argv)

    app = create_app(args.config)
    with app.app_context():
        summary = backfill_daily_contributions(db.session)
        print(f"Migrated: {summary['migrated']}  Failed: {summary['failed']}  "
              f"Skipped: {summary['skipped']}  Total: {summary['total']}")
        for err in summary["errors"]:
            print(f"  {err['username']} ({err['user_id']}): {err['error']}")

        if args.normalize_urls:
            fixed = normalize_legacy_website_urls(db.session)
            print(f"Normalized website_url on {fixed} profiles")

    return 1 if summary["failed"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
