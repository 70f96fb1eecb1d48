"""
Pydantic input schemas
Validated shapes for client hints supplied by API callers and the CLI
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from client_classifier.core.models import ClientHintsBrand, ClientHintsData


class ClientHintsBrandModel(BaseModel):
    """One navigator.userAgentData.brands entry"""
    brand: str
    version: Optional[str] = None


class ClientHintsModel(BaseModel):
    """navigator.userAgentData low-entropy values"""
    brands: List[ClientHintsBrandModel] = Field(default_factory=list)
    mobile: bool = False
    platform: str = ""

    def to_client_hints(self) -> ClientHintsData:
        """Convert to the classifier's ClientHintsData"""
        return ClientHintsData(
            brands=tuple(ClientHintsBrand(brand=b.brand, version=b.version or "") for b in self.brands),
            mobile=self.mobile,
            platform=self.platform,
        )
