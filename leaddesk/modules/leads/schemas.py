"""
Lead schemas - lead profile forms plus the lead's tasks, ratings and SD portal entries
"""

from typing import Literal, Optional

from pydantic import Field

from leaddesk.core.fields import (
    Email,
    Letters,
    OptionalDate,
    OptionalEmail,
    OptionalPhone,
    OptionalStr,
    Phone,
    PositiveAmount,
    RecordDate,
    RecordSchema,
    RequiredStr,
)


class LeadDetails(RecordSchema):
    prefix: RequiredStr = "Mr."
    firstName: Letters
    lastName: Letters
    leadName: Letters
    emailID: Email = Field(..., title="Email ID")
    secondaryEmail: OptionalEmail = None
    phoneNumber: Phone
    alternatePhoneNumber: OptionalPhone = None
    whatsappNumber: OptionalPhone = Field(None, title="WhatsApp Number")
    accountManager: Letters
    legalManager: Letters
    leadOwner: Letters
    customerType: RequiredStr
    accountStatus: RequiredStr
    leadCreatedTime: RecordDate
    modifiedTime: RecordDate


class LeadStatus(RecordSchema):
    """Stored under leadStatusData"""

    leadStatus: Literal["New", "In Progress", "Closed", "Rejected"]
    legalStatus: Literal["Pending", "Approved", "Rejected", "Under Review"]
    harassmentStatus: Literal["Not Reported", "Reported", "Resolved"]
    paymentStatus: Literal["Paid", "Pending", "Overdue", "Cancelled"]


class MainDetails(RecordSchema):
    disposableIncome: float
    email: Email
    accountManager: RequiredStr
    accountStatus: RequiredStr
    customerType: RequiredStr
    leadStatus: RequiredStr
    leadUniqueId: RequiredStr = Field(..., title="Lead Unique ID")


class WebsiteDetails(RecordSchema):
    outstandingAmount: PositiveAmount
    noOfLoans: int = Field(..., ge=1, le=10, title="No Of Loans")
    missedPayment: RequiredStr
    source: RequiredStr
    experiencingHarassment: RequiredStr


class Task(RecordSchema):
    """Stored under taskProfiles"""

    taskOwner: RequiredStr = "Marketing Team"
    subject: RequiredStr
    dueDate: RequiredStr
    status: RequiredStr = "Not Started"
    priority: RequiredStr = "High"
    billNumber: int
    ownerEmail1: Email = Field(..., title="Owner Email1")
    description: RequiredStr
    contact: OptionalStr = None
    deal: OptionalStr = None
    repeat: bool = False
    reminder: bool = False


class Rating(RecordSchema):
    leadName: RequiredStr
    reviewComment: RequiredStr
    leadId: RequiredStr = Field(..., title="Lead ID")
    ratings: RequiredStr
    oldRecordId: RequiredStr = Field(..., title="Old Record ID")
    ownerEmail: Email
    ratingsOwner: RequiredStr
    ratingFrom: RequiredStr
    callName: RequiredStr
    callId: RequiredStr = Field(..., title="Call ID")


class SDPortalEntry(RecordSchema):
    """Stored under sdPortalData"""

    leadName: RequiredStr
    title: RequiredStr
    agentComments: RequiredStr
    department: RequiredStr
    oldRecordId: RequiredStr = Field(..., title="Old Record ID")
    uploadToWorkdrive: bool = False
    sdPortalOwner: RequiredStr = Field(..., title="SD Portal Owner")
    marketingTeam: RequiredStr
    addedBy: RequiredStr
    clientComments: RequiredStr
    status: RequiredStr
    referName: RequiredStr
    phoneNumber: RequiredStr
    ownerEmail: Email
    followUpDate: OptionalDate = None
    notes: Optional[str] = None
