"""
Document schemas - attachments, customer documents, document links and e-sign documents

File contents travel as base64 data URLs inside the record, the same way the
upload dialogs stored them.
"""

from pydantic import Field

from leaddesk.core.fields import Email, OptionalEmail, OptionalStr, RecordSchema, RequiredStr, Url


class Attachment(RecordSchema):
    oldAutonumber: int
    oldRecordId: RequiredStr = Field(..., title="Old Record ID")
    lead: RequiredStr
    ownerEmail: Email = Field(..., title="Owner email")
    fileUpload: RequiredStr = Field(..., title="File upload")
    attachmentOwner: RequiredStr = Field(..., title="Attachment owner")
    description: RequiredStr
    fileName: OptionalStr = None


class CustomerDocuments(RecordSchema):
    loanAgreementCopyName: RequiredStr = Field(..., title="The copy of the loan agreements")
    creditFileCopyName: RequiredStr = Field(..., title="Copy of credit file")
    rentProofName: RequiredStr = Field(..., title="Proof of rent/housing loan")
    wageSlipsName: RequiredStr = Field(..., title="Copy of wage slips and proof of other incomes")
    loanAgreementCopy: OptionalStr = None
    creditFileCopy: OptionalStr = None
    rentProof: OptionalStr = None
    wageSlips: OptionalStr = None


class DocumentURLs(RecordSchema):
    """Stored under documentsURLs"""

    singleDebtUSPLink: Url = Field(..., title="SingleDebt USP Link")
    loeLink: Url = Field(..., title="LOE Link")
    referrerLink: Url
    leadActivityDetails: Url


class ZohoSignDocument(RecordSchema):
    """E-sign document tracking, stored under zohoSignDocuments"""

    zohoSignDocumentsName: RequiredStr = Field(..., title="ZohoSign Documents Name")
    email: Email
    account: RequiredStr
    deal: RequiredStr
    quote: RequiredStr
    dateDeclined: RequiredStr
    declinedReason: RequiredStr
    documentDescription: RequiredStr
    zohoSignDocumentId: RequiredStr = Field(..., title="ZohoSign Document ID")
    moduleName: RequiredStr
    ownerEmail: Email
    zohoSignDocumentsOwner: RequiredStr = Field(..., title="ZohoSign Documents Owner")
    secondaryEmail: OptionalEmail = None
    contact: RequiredStr
    lead: RequiredStr
    dateCompleted: OptionalStr = None
    dateSent: OptionalStr = None
    documentDeadline: RequiredStr
    documentStatus: RequiredStr
    timeToComplete: RequiredStr = Field(..., title="Time to complete")
    documentNote: RequiredStr
    moduleRecordId: RequiredStr = Field(..., title="Module Record ID")
    oldRecordId: RequiredStr = Field(..., title="Old Record Id")
    emailOptOut: bool = False
