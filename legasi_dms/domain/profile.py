"""
Profile Domain Model - Editable project manager profile.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class Profile:
    fullname: str = ""
    email: str = ""
    phone_number: str = ""
    username: str = ""
    profile_image: Optional[str] = None

    def to_update_payload(self) -> Dict[str, Any]:
        """Fields accepted by the update-profile endpoint."""
        return {
            "fullname": self.fullname,
            "email": self.email,
            "phone_number": self.phone_number,
            "username": self.username,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        return cls(
            fullname=data.get("fullname") or "",
            email=data.get("email") or "",
            phone_number=data.get("phone_number") or "",
            username=data.get("username") or "",
            profile_image=data.get("profile_image"),
        )
