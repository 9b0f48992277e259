"""
Request and response schemas for the inquiry relay

Field names follow the website forms (camelCase). Every request field is
optional at the pydantic level; the endpoints check required fields with
missing_fields() and answer 400 listing the absent ones.
"""

from pydantic import BaseModel, Field
from typing import ClassVar, List, Optional, Tuple


class _Inquiry(BaseModel):
    REQUIRED: ClassVar[Tuple[str, ...]] = ()

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent, null or empty."""
        return [name for name in self.REQUIRED if not getattr(self, name)]


class ContactInquiry(_Inquiry):
    """
    General contact form
    Subject line uses childName
    """
    REQUIRED: ClassVar[Tuple[str, ...]] = ("childName", "phone", "message")

    childName: Optional[str] = Field(None, description="Name of the child")
    phone: Optional[str] = Field(None, description="Parent phone number")
    admissionClass: Optional[str] = Field(None, description="Class the parent is asking about")
    message: Optional[str] = Field(None, description="Free-text message")


class AdmissionInquiry(_Inquiry):
    """
    Admission form
    Subject line uses studentName and admissionClass
    """
    REQUIRED: ClassVar[Tuple[str, ...]] = ("studentName", "admissionClass", "dob", "phone")

    studentName: Optional[str] = Field(None, description="Full name of the student")
    admissionClass: Optional[str] = Field(None, description="Class applied for")
    dob: Optional[str] = Field(None, description="Date of birth as entered on the form")
    phone: Optional[str] = Field(None, description="Parent phone number")
    lastSchool: Optional[str] = Field(None, description="Previously attended school")
    address: Optional[str] = Field(None, description="Home address")


class MessageResponse(BaseModel):
    message: str


class ValidationErrorResponse(BaseModel):
    message: str
    missing: List[str] = []


class DispatchErrorResponse(BaseModel):
    message: str
    error: str
