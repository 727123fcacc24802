# ============================================================================
# app/api/v1/deps.py

from datetime import datetime

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
import jwt

from app.core.logger import logger
from app.core.security import decode_access_token
from app.db.database import get_db
from app.db.models import User
from app.services.case_service import CaseService
from app.services.document_service import DocumentService
from app.services.section_service import SectionService
from app.services.summarization_service import SummarizationService

security = HTTPBearer()

# Session claims copied onto the user row: claim name -> column
_PROFILE_CLAIMS = (("name", "name"), ("email", "email"), ("picture", "image"), ("image", "image"))

# ============================================================================
# JWT Dependency
# ============================================================================

def _sync_profile(user: User, payload: dict) -> bool:
    changed = False
    for claim, column in _PROFILE_CLAIMS:
        value = payload.get(claim)
        if value and getattr(user, column) != value:
            setattr(user, column, value)
            changed = True
    return changed


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Validate the session token and return the acting user.

    The identity provider owns sign-in; the first time a token for a new
    subject is seen, the matching user row is created from its claims.
    """
    token = credentials.credentials

    try:
        payload = decode_access_token(token)

        # Accept either "user_id" or the standard "sub"
        user_id: str = payload.get("user_id") or payload.get("sub")
        if user_id is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token"
            )

    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired"
        )
    except jwt.PyJWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )

    user = db.query(User).filter(User.id == str(user_id)).first()

    if not user:
        user = User(id=str(user_id), created_at=datetime.utcnow())
        _sync_profile(user, payload)
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"User provisioned on first sign-in: {user.id}")
    elif _sync_profile(user, payload):
        db.commit()
        db.refresh(user)

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is deactivated"
        )

    return user

# ============================================================================
# Service Dependencies
# ============================================================================

def get_summarizer(request: Request) -> SummarizationService:
    """The summarizer built at startup and kept on app.state."""
    summarizer = getattr(request.app.state, "summarizer", None)
    if summarizer is None:
        summarizer = SummarizationService()
        request.app.state.summarizer = summarizer
    return summarizer


def get_case_service(db: Session = Depends(get_db)) -> CaseService:
    return CaseService(db)


def get_section_service(db: Session = Depends(get_db)) -> SectionService:
    return SectionService(db)


def get_document_service(
    db: Session = Depends(get_db),
    summarizer: SummarizationService = Depends(get_summarizer),
) -> DocumentService:
    return DocumentService(db, summarizer)
