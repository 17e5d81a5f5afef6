"""
Client Model - shop customer tracked for loyalty points
"""
from dataclasses import dataclass
from typing import Optional

DEFAULT_REWARD_THRESHOLD = 10

@dataclass
class Client:
    """Client document as stored in the clients collection"""
    id: Optional[str]
    name: str
    phone: str
    address: str = ""
    loyalty_points: int = 0

    @classmethod
    def from_document(cls, doc: dict) -> "Client":
        return cls(
            id=str(doc["_id"]),
            name=doc.get("name"),
            phone=doc.get("phone"),
            address=doc.get("address") or "",
            loyalty_points=doc.get("loyaltyPoints") or 0,
        )

    def to_document(self) -> dict:
        """Store layout, without _id"""
        return {
            "name": self.name,
            "phone": self.phone,
            "address": self.address or "",
            "loyaltyPoints": self.loyalty_points,
        }

    def to_dict(self) -> dict:
        """JSON shape returned by the API"""
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "address": self.address or "",
            "loyaltyPoints": self.loyalty_points,
        }

    # Loyalty card derivations, never stored

    def stamps(self, threshold: int = DEFAULT_REWARD_THRESHOLD) -> int:
        return self.loyalty_points % threshold

    def rewards_used(self, threshold: int = DEFAULT_REWARD_THRESHOLD) -> int:
        return self.loyalty_points // threshold

    def reward_available(self, threshold: int = DEFAULT_REWARD_THRESHOLD) -> bool:
        return self.loyalty_points >= threshold
