from core.db import db
from flask_mailman import Mail

mail = Mail()

__all__ = ["db", "mail"]
