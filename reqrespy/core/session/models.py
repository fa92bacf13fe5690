"""
Credential data model.

The credential is an opaque bearer token; timestamps are bookkeeping only.
"""
from dataclasses import dataclass, field
from datetime import datetime
import json

# Fixed key of the durable credential cell
CREDENTIAL_KEY = 'token'


@dataclass
class Credential:
    """
    Bearer token cached after a successful login.
    
    Attributes:
        token: Access token handed back by the OAuth provider, used verbatim
        created_at: When the credential was first stored
        updated_at: Last time the credential was written
    """
    token: str
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    
    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.
        
        Returns:
            Dictionary representation
        """
        return {
            CREDENTIAL_KEY: self.token,
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> 'Credential':
        """
        Create from dictionary.
        
        Args:
            data: Dictionary with credential data
            
        Returns:
            Credential instance
        """
        return cls(
            token=data[CREDENTIAL_KEY],
            created_at=datetime.fromisoformat(data['created_at']) if data.get('created_at') else datetime.now(),
            updated_at=datetime.fromisoformat(data['updated_at']) if data.get('updated_at') else datetime.now(),
        )
    
    def to_json(self) -> str:
        return json.dumps(self.to_dict())
    
    @classmethod
    def from_json(cls, json_str: str) -> 'Credential':
        return cls.from_dict(json.loads(json_str))
    
    def is_valid(self) -> bool:
        """True if the token is a non-empty string."""
        return isinstance(self.token, str) and bool(self.token)
    
    def update_timestamp(self) -> None:
        """Update the updated_at timestamp to now."""
        self.updated_at = datetime.now()
    
    def __repr__(self) -> str:
        # Keep tokens out of logs and tracebacks
        return f"Credential(token='***', updated_at={self.updated_at.isoformat()})"
