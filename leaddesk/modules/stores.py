"""
Every record store of the lead workspace, keyed as it is persisted.
"""

from leaddesk.core.records.registry import StoreDefinition, StoreKind, StoreRegistry
from leaddesk.modules.applicants.schemas import (
    ApplicantAddress,
    ApplicantPersonalDetails,
    EmploymentQualification,
    IncomeExpenditure,
    MonthlyExpenditure,
)
from leaddesk.modules.billing.schemas import Bill, EnachDetail, TaxInvoice, TrialPDPInvoice
from leaddesk.modules.creditors.schemas import (
    CreditorPayment,
    CreditorProfile,
    CreditorRecord,
    DebtDetail,
    DMPDetail,
    PTPProfile,
)
from leaddesk.modules.documents.schemas import (
    Attachment,
    CustomerDocuments,
    DocumentURLs,
    ZohoSignDocument,
)
from leaddesk.modules.leads.schemas import (
    LeadDetails,
    LeadStatus,
    MainDetails,
    Rating,
    SDPortalEntry,
    Task,
    WebsiteDetails,
)
from leaddesk.modules.lookups.schemas import BankType, LegalStatus, TypeOfCredit
from leaddesk.modules.messaging.schemas import WhatsAppMessage

PROFILE_SAVED = "Data has been saved."
LOOKUP_DELETE = "You won't be able to revert this!"


def _profile(key: str, schema, label: str) -> StoreDefinition:
    return StoreDefinition(
        key=key,
        schema=schema,
        label=label,
        kind=StoreKind.PROFILE,
        saved_message=PROFILE_SAVED,
    )


STORE_DEFINITIONS = [
    # Applicant profile forms
    _profile("applicantDetails", ApplicantPersonalDetails, "Applicant personal"),
    _profile("applicantAddress", ApplicantAddress, "Applicant address"),
    _profile("employmentQualificationData", EmploymentQualification, "Employment"),
    _profile("incomeDetailsOfFirstApplicant", IncomeExpenditure, "Income"),
    _profile("monthlyExpenditure", MonthlyExpenditure, "Monthly expenditure"),
    # Lead profile forms
    _profile("leadDetails", LeadDetails, "Lead"),
    _profile("leadStatusData", LeadStatus, "Lead status"),
    _profile("mainDetailsData", MainDetails, "Main"),
    _profile("websiteDetailsData", WebsiteDetails, "Website"),
    # Lead records
    StoreDefinition(
        key="taskProfiles",
        schema=Task,
        label="Task",
        search_fields=("subject", "taskOwner", "description"),
    ),
    StoreDefinition(key="ratings", schema=Rating, label="Rating", search_fields=("leadName", "ratingsOwner")),
    StoreDefinition(
        key="sdPortalData",
        schema=SDPortalEntry,
        label="SD Portal",
        search_fields=("leadName", "title", "referName"),
    ),
    # Creditors
    StoreDefinition(
        key="creditorRecords",
        schema=CreditorRecord,
        label="Creditor record",
        search_fields=("creditorsName", "leadName", "loanAccountNumber"),
    ),
    StoreDefinition(
        key="creditorProfiles",
        schema=CreditorProfile,
        label="Creditor profile",
        search_fields=("creditorsProfileName", "city"),
    ),
    StoreDefinition(key="debtDetails", schema=DebtDetail, label="Debt", search_fields=("creditorsName", "bankType")),
    StoreDefinition(
        key="creditorPayments",
        schema=CreditorPayment,
        label="Creditor payment",
        search_fields=("leadName", "billName", "creditorName"),
    ),
    StoreDefinition(key="ptpProfiles", schema=PTPProfile, label="PTP", search_fields=("oldPtpName", "lead")),
    StoreDefinition(key="dmpDetails", schema=DMPDetail, label="DMP", search_fields=("leadName", "creditorsName")),
    # Billing
    StoreDefinition(
        key="billProfiles",
        schema=Bill,
        label="Bill",
        search_fields=("billName", "billsOwner", "creditorName", "leadName"),
    ),
    StoreDefinition(
        key="invoiceDetails",
        schema=TaxInvoice,
        label="Tax invoice",
        search_fields=("invoiceNumber", "description"),
    ),
    StoreDefinition(
        key="trialPDPInvoices",
        schema=TrialPDPInvoice,
        label="Trial PDP invoice",
        search_fields=("pdpInvoiceNumber", "leadName"),
    ),
    StoreDefinition(
        key="enachDetails",
        schema=EnachDetail,
        label="ENACH",
        search_fields=("transactionID", "enachCustomer"),
    ),
    # Documents
    StoreDefinition(key="attachments", schema=Attachment, label="Attachment", search_fields=("lead", "description")),
    StoreDefinition(key="customerDocuments", schema=CustomerDocuments, label="Customer document"),
    StoreDefinition(key="documentsURLs", schema=DocumentURLs, label="Document URL"),
    StoreDefinition(
        key="zohoSignDocuments",
        schema=ZohoSignDocument,
        label="ZohoSign document",
        search_fields=("zohoSignDocumentsName", "lead", "contact"),
    ),
    # Messaging
    StoreDefinition(
        key="whatsappMessages",
        schema=WhatsAppMessage,
        label="WhatsApp message",
        search_fields=("whatsappMessagesName", "message", "lead", "contact"),
    ),
    # Lookup lists
    StoreDefinition(key="bankTypes", schema=BankType, label="Bank type", delete_message=LOOKUP_DELETE),
    StoreDefinition(key="legalStatuses", schema=LegalStatus, label="Legal status", delete_message=LOOKUP_DELETE),
    StoreDefinition(key="typesOfCredit", schema=TypeOfCredit, label="Type of credit", delete_message=LOOKUP_DELETE),
]

registry = StoreRegistry(STORE_DEFINITIONS)
