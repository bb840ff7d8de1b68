"""Resource façades, one per Paystack API resource family."""

from paystack_client.resources.base import BaseResource
from paystack_client.resources.customer import CustomerResource
from paystack_client.resources.dispute import DisputeResource
from paystack_client.resources.miscellaneous import MiscellaneousResource
from paystack_client.resources.plan import PlanResource
from paystack_client.resources.refund import RefundResource
from paystack_client.resources.subscription import SubscriptionResource
from paystack_client.resources.transaction import TransactionResource
from paystack_client.resources.transfer import TransferResource
from paystack_client.resources.transfer_recipient import TransferRecipientResource
from paystack_client.resources.verification import VerificationResource

__all__ = [
    "BaseResource",
    "CustomerResource",
    "DisputeResource",
    "MiscellaneousResource",
    "PlanResource",
    "RefundResource",
    "SubscriptionResource",
    "TransactionResource",
    "TransferRecipientResource",
    "TransferResource",
    "VerificationResource",
]
