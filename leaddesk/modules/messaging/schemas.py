"""
WhatsApp message log schema
"""

from pydantic import Field

from leaddesk.core.fields import Email, RecordSchema, RequiredStr


class WhatsAppMessage(RecordSchema):
    """Stored under whatsappMessages"""

    whatsappMessagesImage: RequiredStr = Field(..., title="WhatsApp Messages Image")
    whatsappMessagesInformation: RequiredStr = Field(..., title="WhatsApp Messages Information")
    whatsappMessagesName: RequiredStr = Field(..., title="WhatsApp Messages Name")
    message: RequiredStr
    mediaType: RequiredStr
    direction: RequiredStr
    contact: RequiredStr
    status: RequiredStr
    to: RequiredStr
    specificBACStatus: RequiredStr = Field(..., title="Specific BAC Status")
    messageFirst255Characters: RequiredStr = Field(..., title="Message-First 255 characters", max_length=255)
    remindTime: RequiredStr
    whatsappLabel: RequiredStr = Field(..., title="WhatsApp Label")
    whatsappMessagesOwner: RequiredStr = Field(..., title="WhatsApp Messages Owner")
    mediaName: RequiredStr
    media: RequiredStr
    lead: RequiredStr
    messageTime: RequiredStr
    from_: RequiredStr = Field(..., alias="from", title="From")
    bagAChatMessageId: RequiredStr = Field(..., title="BagAChat MessageId")
    bagAChatLinkedWANumber: RequiredStr = Field(..., title="BagAChat Linked WA Number")
    ownerEmail: Email = Field(..., title="Owner email")
    oldRecordId: RequiredStr = Field(..., title="Old Record ID")
    whatsappType: RequiredStr = Field(..., title="WhatsApp Type")
