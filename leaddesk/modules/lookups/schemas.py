"""
Lookup list schemas - bank types, legal statuses and types of credit
"""

from typing import Literal

from leaddesk.core.fields import RecordSchema, RequiredStr


class LookupEntry(RecordSchema):
    name: RequiredStr
    status: Literal["active", "inactive"] = "active"


class BankType(LookupEntry):
    pass


class LegalStatus(LookupEntry):
    pass


class TypeOfCredit(LookupEntry):
    pass
