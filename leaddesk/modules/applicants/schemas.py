"""
Applicant schemas - single-object profile forms for the first applicant
"""

from pydantic import Field

from leaddesk.core.fields import (
    AadharCard,
    Letters,
    OptionalStr,
    PanCard,
    PastDate,
    Pincode,
    RecordDate,
    RecordSchema,
    RequiredStr,
)


class ApplicantPersonalDetails(RecordSchema):
    """Personal details, stored under applicantDetails"""

    pancard: PanCard
    aadharCard: AadharCard = Field(..., title="Aadhar card")
    dateOfBirth: PastDate = Field(..., title="Date of Birth")
    ageOfClient: int = Field(..., ge=1, title="Age of Client")
    fatherName: Letters
    motherName: Letters
    wifeName: Letters
    reasonForFinancialDifficulty: Letters = Field(..., title="Reason for financial difficulty")
    numberOfChildren: int = Field(..., ge=0, title="Number of Children")


class ApplicantAddress(RecordSchema):
    flatNo: RequiredStr = Field(..., title="Flat No/Building Name")
    street: RequiredStr
    city: Letters
    state: RequiredStr
    pincode: Pincode
    accommodationStatus: RequiredStr
    timeAtAddress: RequiredStr = Field(..., title="Time at Address")
    educationStatus: RequiredStr


class EmploymentQualification(RecordSchema):
    employmentStatus: RequiredStr
    officeStreet: RequiredStr
    officeState: RequiredStr
    officeCity: Letters = Field(..., title="Office city")
    officePincode: Pincode = Field(..., title="Pincode")
    employmentFirm: RequiredStr


class IncomeExpenditure(RecordSchema):
    """Income of the first applicant, stored under incomeDetailsOfFirstApplicant"""

    wagePerMonth: float = Field(..., title="Wage/Month")
    otherIncome: float
    pensionPerMonth: float = Field(..., title="Pension/Month")
    totalIncome: float
    incomeAsPerProof: RequiredStr = Field(..., title="Income As Per Proof")
    incomeRatio: float = Field(..., title="Income Ratio %")
    nextSalaryPaymentDate: RecordDate = Field(..., title="Next salary payment date")
    salaryAccount: RequiredStr
    remarks: OptionalStr = None


class MonthlyExpenditure(RecordSchema):
    utilities: float
    medicalFees: float
    homeLoan: float
    rent: float
    educationFees: float
    otherLifeMedicalPolicies: float = Field(..., title="Other Life/Medical Policies")
    pension: float
    commuteToWorkCost: float = Field(..., title="Commute to work cost")
    emi: float = Field(..., title="EMI")
    telephone: float
    mobileInternet: float = Field(..., title="Mobile/Internet")
    totalRepairMaintenance: float = Field(..., title="Total Repair/Maintenance")
    housekeepingFoodMaid: float = Field(..., title="Housekeeping Food/Maid")
    totalCostForRunningCarBike: float = Field(..., title="Total cost for running Car/Bike")
    otherSecureLoan: float
    others: float
    totalExperience: float
