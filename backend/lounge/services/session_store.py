"""
Login session storage backed by the sessions table
"""
import json
import logging
from typing import Any, Dict, Optional

from lounge.db.database import Database
from lounge.models.session import SessionRecord
from lounge.utils.time_utils import now_ms

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE_MS = 24 * 60 * 60 * 1000


class SessionStore:
    """
    get / set / destroy / touch / prune over SessionRecord rows.

    A row is live while expire > now; expired rows are ignored by get and
    removed by prune.
    """

    def __init__(self, database: Database, max_age_ms: int = DEFAULT_MAX_AGE_MS):
        self.database = database
        self.max_age_ms = max_age_ms

    def _expiry(self) -> int:
        return now_ms() + self.max_age_ms

    def get(self, sid: str) -> Optional[Dict[str, Any]]:
        with self.database.session() as db:
            record = db.query(SessionRecord).filter(
                SessionRecord.sid == sid,
                SessionRecord.expire > now_ms(),
            ).first()
            if not record:
                return None
            return json.loads(record.sess)

    def set(self, sid: str, data: Dict[str, Any]) -> None:
        with self.database.session() as db:
            record = db.query(SessionRecord).filter(SessionRecord.sid == sid).first()
            if record:
                record.sess = json.dumps(data)
                record.expire = self._expiry()
            else:
                db.add(SessionRecord(sid=sid, sess=json.dumps(data), expire=self._expiry()))
            db.commit()

    def touch(self, sid: str) -> None:
        """Slide the expiry of a session forward"""
        with self.database.session() as db:
            db.query(SessionRecord).filter(SessionRecord.sid == sid).update(
                {SessionRecord.expire: self._expiry()}, synchronize_session=False
            )
            db.commit()

    def destroy(self, sid: str) -> None:
        with self.database.session() as db:
            db.query(SessionRecord).filter(SessionRecord.sid == sid).delete(synchronize_session=False)
            db.commit()

    def prune(self) -> int:
        """Delete expired sessions, returns the number removed"""
        with self.database.session() as db:
            removed = db.query(SessionRecord).filter(
                SessionRecord.expire <= now_ms()
            ).delete(synchronize_session=False)
            db.commit()
        if removed:
            logger.info("Pruned %d expired sessions", removed)
        return removed

    def length(self) -> int:
        with self.database.session() as db:
            return db.query(SessionRecord).filter(SessionRecord.expire > now_ms()).count()

    def clear(self) -> None:
        with self.database.session() as db:
            db.query(SessionRecord).delete(synchronize_session=False)
            db.commit()
