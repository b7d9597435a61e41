import contextlib
import logging

from database.database import SessionLocal
from database.repository import VolunteerRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def volunteer_uow():
    """Session scope for one CLI or script invocation.

    Yields a VolunteerRepository bound to a fresh Session. MatchEngine and
    OnboardingService commit their own writes, so the closing commit only
    persists changes a caller flushed through the repository without
    committing (mark_viewed, set_dismissed). Rolls back on exception,
    always closes.

    Usage:
        with volunteer_uow() as repo:
            profile = repo.get_profile(profile_id)
            result = MatchEngine(repo).generate_matches(profile)
    """
    session = SessionLocal()
    try:
        repo = VolunteerRepository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
