"""Payment processor integrations."""

from .stripe_gateway import STRIPE_API_VERSION, StripeGateway

__all__ = ["STRIPE_API_VERSION", "StripeGateway"]
