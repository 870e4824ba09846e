"""
Creditor schemas - creditor records and profiles, debts, payments, PTPs and DMP entries
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from leaddesk.core.fields import (
    Amount,
    Email,
    OptionalDate,
    OptionalStr,
    PositiveAmount,
    RecordDate,
    RecordSchema,
    RequiredStr,
)


class CreditorRecord(RecordSchema):
    creditorsName: RequiredStr
    email: Email
    paymentStatus: RequiredStr
    accountNumber: RequiredStr
    creditorPaymentPendingReason: RequiredStr
    ownerEmail: Email
    creditorRecordOwner: RequiredStr
    leadName: RequiredStr
    status: RequiredStr
    offerLetterDate: RecordDate
    typeOfCredit: RequiredStr
    currency: RequiredStr
    totalDebtAmount: float
    remainingDebtAmount: float
    paidAmount: float
    reasonOfExclusion: RequiredStr
    loanAccountNumber: RequiredStr
    ptpAmount: RequiredStr = Field(..., title="PTP Amount")
    ptp: RequiredStr = Field(..., title="PTP")
    ratio: float
    actualCreditorsAmount: float = Field(..., title="Actual Creditor's Amount")
    actionNeeded: RequiredStr
    keepAmountFixed: RequiredStr
    dmpCycleNumber: RequiredStr = Field(..., title="DMP Cycle Number")
    reasonToKeepAmountFixed: RequiredStr = Field(..., title="Reason to Keep Amount Fixed")
    crtNo: RequiredStr = Field(..., title="CRT No")


class CreditorProfile(RecordSchema):
    """Stored under creditorProfiles"""

    creditorsProfileName: RequiredStr = Field(..., title="Profile Name")
    ownerEmail: Email
    creditorsProfileOwner: RequiredStr = Field(..., title="Profile Owner")
    bankType: RequiredStr
    mobileNo1: RequiredStr = Field(..., title="Mobile No1")
    gstNumber: RequiredStr = Field(..., title="GST Number")
    city: RequiredStr
    zipCode: RequiredStr
    mobileNo2: OptionalStr = None
    address: OptionalStr = None


class DebtDetail(RecordSchema):
    """Stored under debtDetails"""

    creditorsName: RequiredStr = Field(..., min_length=2, title="Creditor's Name")
    bankType: RequiredStr
    typeOfCredit: Literal["Personal Loan", "Home Loan", "Car Loan"]
    accountNumber: PositiveAmount = Field(..., title="Account number")
    balanceOS: PositiveAmount = Field(..., title="Balance O/S (₹)")
    currentMonthlyEMI: PositiveAmount = Field(..., title="Current Monthly EMI (₹)")
    noOfMissedEMI: int = Field(..., ge=0, title="No of Missed EMI")
    sanctionedAmount: PositiveAmount = Field(..., title="Sanctioned Amount (₹)")
    loanStartDate: RecordDate = Field(..., ge=date(2000, 1, 1))
    loanAgreementCopy: RequiredStr = Field(..., title="Copy of Loan Agreement")


class AuditStamp(BaseModel):
    name: RequiredStr
    datetime: RecordDate


class CreditorPayment(RecordSchema):
    """Stored under creditorPayments"""

    leadName: RequiredStr
    billName: RequiredStr
    creditorName: RequiredStr
    billOwner: RequiredStr = Field(..., title="Bill Owner Name")
    customeremail: Email = Field(..., title="Customer email")
    modeOfPayment: RequiredStr = Field(..., title="Mode of Payment")
    paymentMade: RequiredStr
    paymentStatus: RequiredStr
    accountNumber: int
    balance: float
    subTotal: float
    grandTotal: float
    tax: float = Field(..., ge=0, le=100)
    billCycleNumber: int
    billDate: RecordDate
    createdBy: AuditStamp
    modifiedBy: AuditStamp
    dueDate: RecordDate
    paidDate: RecordDate
    checkIssueDate: RecordDate
    checkClearingDate: RecordDate
    ownerEmail: Email
    creditorPaymentOwner: RequiredStr
    status: RequiredStr
    typeOfCredit: RequiredStr = Field(..., title="Type of Credit")
    paidAmount: float


class PTPProfile(RecordSchema):
    """Promise-to-pay profile, stored under ptpProfiles"""

    oldPtpName: RequiredStr = Field(..., title="Old PTP Name")
    lead: RequiredStr
    paymentNumber: int
    tokenAmount: float
    billCycleNumber: int
    tokenPaymentLink: RequiredStr
    exchangeRate: float
    oldRecordId: RequiredStr = Field(..., title="Old Record ID")
    ownerEmail: Email
    ptpOwner: RequiredStr = Field(..., title="PTP Owner")
    leadEmail: Email
    tokenAmountPaidDate: RequiredStr
    tokenPaymentStatus: RequiredStr
    currency: RequiredStr

    callerName: RequiredStr
    bankName: RequiredStr
    accountNumber: RequiredStr
    paidDate: RequiredStr
    accountManagerName: RequiredStr
    accountManagerEmail: Email
    paraLegalAgentName: RequiredStr
    callerNumber: RequiredStr
    city: RequiredStr
    ptpAmountProposed: RequiredStr = Field(..., title="PTP Amount Proposed")
    totalAmountPaid: RequiredStr
    paymentStatus: RequiredStr
    ptpPaymentLink: RequiredStr = Field(..., title="PTP Payment Link")
    nextFollowUpDate: OptionalDate = None


class DMPDetail(RecordSchema):
    """Debt management plan entry, stored under dmpDetails"""

    leadName: RequiredStr
    creditorRecordOwner: RequiredStr
    creditorsName: RequiredStr
    paymentStatus: RequiredStr
    accountNumber: RequiredStr
    status: RequiredStr
    typeOfCredit: RequiredStr = Field(..., title="Type of credit")
    offerLetterDate: RecordDate
    creditorPaymentPendingReason: RequiredStr
    modifiedBy: RequiredStr
    createdBy: RequiredStr
    totalDebtAmount: Amount
    remainingDebtAmount: Amount
    actualCreditorsAmount: Amount = Field(..., title="Actual Creditor's Amount")
    paidAmount: Amount
    loanAccountNumber: RequiredStr
    keepAmountFixed: bool
    actionNeeded: RequiredStr
    dmpCycleNumber: RequiredStr = Field(..., title="DMP Cycle Number")
    ptpAmount: Amount = Field(..., title="PTP Amount")
    ptp: RequiredStr = Field(..., title="PTP")
    crtNo: RequiredStr = Field(..., title="CRT No")
    expectedCreditorsAmount: Amount = Field(..., title="Expected Creditor's Amount")
