from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class ViewSelection(str, Enum):
    FORM = 'form'
    LIST = 'list'


class ErrorKind(str, Enum):
    VALIDATION = 'validation'
    PHOTO_READ = 'photo_read'
    API = 'api'


@dataclass
class PhotoFile:
    """Handle to a selected image file; `read` returns the raw bytes on demand."""
    name: str
    mime_type: str
    size: int
    read: Callable[[], bytes] = field(repr=False, compare=False)


@dataclass
class UserDraft:
    name: str = ''
    surname: str = ''
    birth_date: str = ''  # YYYY-MM-DD
    photo: Optional[PhotoFile] = None

    def is_complete(self) -> bool:
        return bool(self.name.strip() and self.surname.strip()
                    and self.birth_date and self.photo is not None)


@dataclass(frozen=True)
class SubmissionPayload:
    name: str
    surname: str
    birth_date: str
    photo: str  # base64 without the data-URI prefix

    def to_json(self) -> Dict[str, str]:
        return {
            'name': self.name,
            'surname': self.surname,
            'birthDate': self.birth_date,
            'photo': self.photo,
        }


@dataclass
class UserRecord:
    user_id: str
    name: str
    surname: str
    birth_date: str
    photo_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def user_from_dict(d: Dict[str, Any]) -> UserRecord:
    """Safe conversion from the API's camelCase JSON, ignoring unknown keys."""
    if not isinstance(d, dict):
        d = {}
    photo_url = d.get('photoUrl')
    return UserRecord(
        user_id=str(d.get('userID') or ''),
        name=str(d.get('name') or ''),
        surname=str(d.get('surname') or ''),
        birth_date=str(d.get('birthDate') or ''),
        photo_url=photo_url if isinstance(photo_url, str) and photo_url else None,
    )


def users_from_list(items: Any) -> List[UserRecord]:
    if not isinstance(items, list):
        return []
    return [user_from_dict(item) for item in items]


# --- Pipeline results ---

@dataclass
class SubmissionResult:
    user: Optional[UserRecord] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class FetchResult:
    users: List[UserRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# --- Events emitted by views to the page shell ---

@dataclass(frozen=True)
class SubmissionSucceeded:
    user: UserRecord


@dataclass(frozen=True)
class UsersFetched:
    users: List[UserRecord]


# --- Per-view state held in the session ---

@dataclass
class SubmissionState:
    draft: UserDraft = field(default_factory=UserDraft)
    preview: Optional[str] = None  # data-URI
    error: str = ''
    submitting: bool = False
    uploader_nonce: int = 0  # bumped to hand the file uploader a fresh, empty widget
    clear_inputs: bool = False

    def is_pristine(self) -> bool:
        return (self.draft == UserDraft() and self.preview is None
                and not self.error and not self.submitting)

    def reset(self):
        self.draft = UserDraft()
        self.preview = None
        self.error = ''
        self.submitting = False
        self.uploader_nonce += 1
        self.clear_inputs = True


@dataclass
class ListingState:
    users: List[UserRecord] = field(default_factory=list)
    error: str = ''
    loading: bool = False
    mounted: bool = False


@dataclass
class ShellState:
    selection: ViewSelection = ViewSelection.FORM
    users: List[UserRecord] = field(default_factory=list)  # last fetched collection
