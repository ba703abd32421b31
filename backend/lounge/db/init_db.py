"""
Database initialisation: tables, first admin and default venue setup
"""
import logging

from lounge.core.config import Settings
from lounge.db.database import Database
from lounge.models.device_config import DeviceConfig
from lounge.models.pricing import PricingConfig
from lounge.services.auth_service import bootstrap_admin

logger = logging.getLogger(__name__)

DEFAULT_DEVICES = {
    "PC": 5,
    "PS5": 3,
}

DEFAULT_PRICES = {
    "PC": [("30 mins", "10"), ("1 hour", "18"), ("2 hours", "30")],
    "PS5": [("30 mins", "15"), ("1 hour", "25"), ("2 hours", "45")],
}


def seed_defaults(db) -> bool:
    """Add the default seat layout and price list to an empty database"""
    if db.query(DeviceConfig).count() > 0:
        return False

    for category, count in DEFAULT_DEVICES.items():
        seats = [f"{category}-{n}" for n in range(1, count + 1)]
        db.add(DeviceConfig(category=category, count=count, seats=seats))
        for duration, price in DEFAULT_PRICES[category]:
            db.add(PricingConfig(category=category, duration=duration, price=price, person_count=1))
    db.commit()
    logger.info("Seeded default device configs and pricing")
    return True


def init_db(database: Database, settings: Settings) -> None:
    """Create all tables, then the initial admin and (optionally) defaults"""
    database.create_all()
    with database.session() as db:
        bootstrap_admin(db, settings.admin_username, settings.admin_password)
        if settings.seed_defaults:
            seed_defaults(db)
    logger.info("Database ready (%s)", database.dialect)


if __name__ == "__main__":
    from lounge.core.logging_config import configure_logging

    settings = Settings()
    configure_logging(settings.log_level)
    database = Database(settings.sqlalchemy_url)
    init_db(database, settings)
    database.dispose()
