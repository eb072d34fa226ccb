import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base

from jobly.core.config import settings

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
)

# Create Base class for models
Base = declarative_base()

# $1, $2, ... as emitted by the statement builders
_POSITIONAL_PARAM = re.compile(r"\$(\d+)")


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create the companies and jobs tables if they do not exist.

    Args:
        bind: Engine to create the tables on (default: the configured engine)
    """
    from jobly.models import company, job  # Import models to register them
    Base.metadata.create_all(bind=bind or engine)


def execute(db: Session, statement: str, values: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """
    Run a statement written with positional placeholders.

    The builders emit `$1`, `$2`, ... placeholders; they are rewritten to
    SQLAlchemy named binds (`:p1`, `:p2`, ...) so the same text runs on any
    dialect SQLAlchemy supports.

    Args:
        db: Database session
        statement: SQL text using `$n` placeholders
        values: Positional arguments, `values[0]` binds `$1`

    Returns:
        Rows as dictionaries keyed by column label, or an empty list for
        statements that return no rows
    """
    bound_statement = _POSITIONAL_PARAM.sub(lambda m: f":p{m.group(1)}", statement)
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}

    result = db.execute(text(bound_statement), params)
    if not result.returns_rows:
        return []

    return [dict(row) for row in result.mappings()]
