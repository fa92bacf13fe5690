"""
User resource models.

Records are decoded from the remote collection on every call and never
persisted locally.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from ..exceptions import ReqresDecodeError


def _require(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise ReqresDecodeError(f"Missing '{key}' in user record", payload=data)
    value = data[key]
    # bool is an int subclass; an id of True is still malformed
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ReqresDecodeError(
            f"Field '{key}' should be {kind.__name__}, got {type(value).__name__}",
            payload=data
        )
    return value


@dataclass(frozen=True)
class UserRecord:
    """
    A user as served by the remote collection.
    
    Attributes:
        id: Identifies the record within one fetch
        first_name: Given name
        last_name: Family name
        email: Contact address
        avatar: Avatar image URL, when the API provides one
    """
    id: int
    first_name: str
    last_name: str
    email: str
    avatar: Optional[str] = None
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
    
    @classmethod
    def from_dict(cls, data: Any) -> 'UserRecord':
        """
        Decode a record from the API's JSON object.
        
        Raises:
            ReqresDecodeError: If a mandatory field is missing or mistyped
        """
        if not isinstance(data, Mapping):
            raise ReqresDecodeError("User record is not an object", payload=data)
        
        avatar = data.get('avatar')
        return cls(
            id=_require(data, 'id', int),
            first_name=_require(data, 'first_name', str),
            last_name=_require(data, 'last_name', str),
            email=_require(data, 'email', str),
            avatar=avatar if isinstance(avatar, str) else None,
        )
    
    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
        }
        if self.avatar is not None:
            result['avatar'] = self.avatar
        return result
    
    def __str__(self) -> str:
        return f"#{self.id} {self.full_name} <{self.email}>"


@dataclass(frozen=True)
class UserPage:
    """One page of the user collection plus its pagination envelope."""
    page: int
    per_page: int
    total: int
    total_pages: int
    users: List[UserRecord] = field(default_factory=list)
    
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
    
    def __iter__(self):
        return iter(self.users)
    
    def __len__(self) -> int:
        return len(self.users)
    
    @classmethod
    def from_payload(cls, payload: Any, requested_page: int) -> 'UserPage':
        """
        Decode a list response ``{data: [...], page, per_page, total, total_pages}``.
        
        Missing pagination keys fall back to the requested page and the
        number of decoded records.
        
        Raises:
            ReqresDecodeError: If ``data`` is missing or not a list of records
        """
        if not isinstance(payload, Mapping) or 'data' not in payload:
            raise ReqresDecodeError("Response has no 'data' member", payload=payload)
        
        items = payload['data']
        if not isinstance(items, list):
            raise ReqresDecodeError("'data' is not a list", payload=payload)
        
        users = [UserRecord.from_dict(item) for item in items]
        
        def _int(key: str, default: int) -> int:
            value = payload.get(key)
            return value if isinstance(value, int) and not isinstance(value, bool) else default
        
        per_page = _int('per_page', len(users))
        total = _int('total', len(users))
        return cls(
            page=_int('page', requested_page),
            per_page=per_page,
            total=total,
            total_pages=_int('total_pages', 1 if users else 0),
            users=users,
        )


@dataclass(frozen=True)
class UserUpdate:
    """Fields accepted by a partial update; serialized in this key order."""
    first_name: str
    last_name: str
    
    def to_dict(self) -> Dict[str, str]:
        return {
            'first_name': self.first_name,
            'last_name': self.last_name,
        }
    
    @classmethod
    def from_fields(cls, fields: Union['UserUpdate', Mapping[str, Any]]) -> 'UserUpdate':
        """
        Accept a UserUpdate or a mapping with both name keys.
        
        Raises:
            ValueError: If a key is missing or not a string
        """
        if isinstance(fields, UserUpdate):
            return fields
        
        missing = [key for key in ('first_name', 'last_name') if key not in fields]
        if missing:
            raise ValueError(f"Missing update fields: {', '.join(missing)}")
        
        first_name, last_name = fields['first_name'], fields['last_name']
        if not isinstance(first_name, str) or not isinstance(last_name, str):
            raise ValueError("first_name and last_name must be strings")
        return cls(first_name=first_name, last_name=last_name)


def decode_single(payload: Any) -> UserRecord:
    """Decode a single-record response ``{data: {...}}``."""
    if not isinstance(payload, Mapping) or 'data' not in payload:
        raise ReqresDecodeError("Response has no 'data' member", payload=payload)
    return UserRecord.from_dict(payload['data'])
