"""
Billing schemas - bills, invoices and ENACH mandate deductions
"""

from pydantic import Field

from leaddesk.core.fields import (
    Amount,
    Email,
    OptionalDate,
    OptionalEmail,
    OptionalStr,
    RecordDate,
    RecordSchema,
    RequiredStr,
    Url,
)


class Bill(RecordSchema):
    """Stored under billProfiles"""

    billName: RequiredStr
    ownerEmail: Email
    billsOwner: RequiredStr
    status: RequiredStr
    modeOfPayment: RequiredStr = Field(..., title="Mode of Payment")
    subTotal: Amount
    tax: Amount
    grandTotal: Amount

    creditorName: OptionalStr = None
    loanAccountNumber: OptionalStr = None
    customerEmail: OptionalEmail = None
    leadName: OptionalStr = None
    typeOfCredit: OptionalStr = None
    billDate: OptionalDate = None
    dueDate: OptionalDate = None
    paidDate: OptionalDate = None
    chequeIssuedDate: OptionalDate = None
    chequeClearingDate: OptionalDate = None
    balance: OptionalStr = None
    paymentMade: OptionalStr = None


class TaxInvoice(RecordSchema):
    """Stored under invoiceDetails"""

    invoiceNumber: RequiredStr
    invoiceSentDate: RecordDate
    invoiceDate: RecordDate
    dueDate: RecordDate
    paymentDate: RecordDate
    paymentMade: RequiredStr
    balanceDue: Amount
    status: RequiredStr
    paymentNumber: RequiredStr
    paymentURL: Url = Field(..., title="Payment URL")
    subTotal: Amount
    tax: Amount
    grandTotal: Amount
    creditorsAmount: Amount
    managementFee: Amount
    managementFeesInclusiveTaxes: Amount
    managementFeesExclusiveTaxes: Amount = Field(..., title="Management Fees Exclusive of Taxes")
    reportingCreditorAmount: Amount = Field(..., title="Reporting - Creditor Amount")
    creditorAmountPaidByClient: Amount = Field(..., title="Creditor Amount Paid by Client")
    description: RequiredStr


class TrialPDPInvoice(RecordSchema):
    """Stored under trialPDPInvoices"""

    trialPDPInvoicesImage: RequiredStr = Field(..., title="Trial PDP Invoices Image")
    pdpInvoiceNumber: RequiredStr = Field(..., title="PDP Invoice Number")
    invoiceDate: RecordDate
    zohoBooksInvoiceId: RequiredStr = Field(..., title="Zoho Books Invoice ID")
    invoiceLink: RequiredStr
    status: RequiredStr
    email: Email
    currency: RequiredStr
    oldRecordId: RequiredStr = Field(..., title="Old Record ID")
    ownerEmail: Email = Field(..., title="Owner email")
    trialPDPInvoicesOwner: RequiredStr = Field(..., title="Trial PDP Invoices Owner")
    leadName: RequiredStr
    pdpExpiryDate: RecordDate = Field(..., title="PDP Expiry Date")
    dueDate: RecordDate
    invoiceAmount: float
    tax: float
    totalAmount: float
    paymentDate: RecordDate
    exchangeRate: float


class EnachDetail(RecordSchema):
    """ENACH mandate deduction, stored under enachDetails"""

    deductAmount: float
    transactionID: RequiredStr = Field(..., title="Transaction ID")
    instructionID: RequiredStr = Field(..., title="Instruction ID")
    transactionStatus: RequiredStr
    deductionDate: RecordDate
    enachCreatedOn: RecordDate = Field(..., title="ENACH Created On")
    enachCustomer: RequiredStr = Field(..., title="ENACH Customer")
    errorStatus: RequiredStr
    umrnNo: int = Field(..., title="UMRN No")
    enachFailureReason: RequiredStr = Field(..., title="ENACH Failure Reason")
    originalDeductionDate: RecordDate
