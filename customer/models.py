"""
API models for the customer service.
"""

from pydantic import Field

from shared.models import CamelModel


class CustomerRegistrationRequest(CamelModel):
    """
    Body of a registration request.
    
    The email is taken as-is; it is neither validated nor checked for an
    existing customer.
    """
    first_name: str = Field(..., description="Customer first name")
    last_name: str = Field(..., description="Customer last name")
    email: str = Field(..., description="Customer email address")
