"""Pydantic models for form validation.

Each form model takes the raw field strings exactly as submitted. Field
validators run the predicates from ``wanderlux.forms.validators`` and raise
``PydanticCustomError`` carrying the user-facing message, so a single
``ValidationError`` holds one entry per failing field.
"""

from enum import Enum
from typing import Any, Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from wanderlux.forms import validators
from wanderlux.pricing import Destination, TravelStyle


def _require(value: Any, predicate: Callable[[Any], bool], message: str) -> str:
    """Run a predicate against a raw value and return it trimmed."""
    if not predicate(value):
        raise PydanticCustomError("field_invalid", message)
    return "" if value is None else str(value).strip()


class FormState(str, Enum):
    """Where a submission ended up."""
    IDLE = "idle"
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    MISSING_INPUTS = "missing_inputs"


class FieldError(BaseModel):
    """A single failing field and the message shown next to it."""
    field: str = Field(description="Form field name")
    message: str = Field(description="User-facing message")


class Outcome(BaseModel):
    """Result of handling one form submission."""
    form: str = Field(description="Form identifier")
    state: FormState = Field(description="Terminal state of the submission")
    errors: List[FieldError] = Field(default_factory=list, description="Every failing field")
    result: Optional[str] = Field(default=None, description="Text written to the result slot")
    total: Optional[int] = Field(default=None, description="Estimated total, calculator only")

    @property
    def accepted(self) -> bool:
        return self.state == FormState.ACCEPTED


class TripRequest(BaseModel):
    """Validated, typed input to the pricing engine."""
    model_config = ConfigDict(frozen=True)

    destination: Destination = Field(description="Destination key")
    # Fractional counts are accepted as entered, not rounded
    traveller_count: float = Field(ge=1, allow_inf_nan=False, description="Number of travellers")
    day_count: float = Field(ge=1, allow_inf_nan=False, description="Number of days")
    style: TravelStyle = Field(description="Travel style tier")


class CalculatorForm(BaseModel):
    """Trip cost calculator form."""
    model_config = ConfigDict(validate_default=True)

    destination: str = ""
    travellers: str = ""
    days: str = ""
    style: str = ""

    @field_validator("destination", mode="before")
    @classmethod
    def validate_destination(cls, v):
        """Destination must be one of the priced destinations."""
        v = "" if v is None else str(v).lower()
        return _require(v, validators.is_known_destination, "Please select a destination.")

    @field_validator("travellers", mode="before")
    @classmethod
    def validate_travellers(cls, v):
        return _require(
            v,
            validators.is_positive_count,
            "Please enter a valid number of travellers (1 or more).",
        )

    @field_validator("days", mode="before")
    @classmethod
    def validate_days(cls, v):
        return _require(
            v,
            validators.is_positive_count,
            "Please enter a valid number of days (1 or more).",
        )

    @field_validator("style", mode="before")
    @classmethod
    def validate_style(cls, v):
        return _require(v, validators.is_known_style, "Please select a travel style.")

    def to_trip_request(self) -> TripRequest:
        """Build the typed pricing input from the validated raw fields."""
        return TripRequest(
            destination=self.destination,
            traveller_count=validators.parse_count(self.travellers),
            day_count=validators.parse_count(self.days),
            style=self.style,
        )


class AppointmentForm(BaseModel):
    """Appointment request form."""
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    date: str = ""
    message: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return _require(v, validators.is_non_empty_name, "Please enter your full name.")

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        return _require(v, validators.is_valid_email, "Please enter a valid email address.")

    @field_validator("phone", mode="before")
    @classmethod
    def validate_phone(cls, v):
        return _require(v, validators.is_valid_phone, "Please enter a valid phone number.")

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v):
        return _require(v, validators.is_valid_date, "Please select a preferred date.")

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, v):
        return _require(
            v,
            validators.is_long_enough_message,
            "Please enter a message (at least 10 characters).",
        )


class ContactForm(BaseModel):
    """Contact message form."""
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    email: str = ""
    message: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return _require(v, validators.is_non_empty_name, "Please enter your name.")

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        return _require(v, validators.is_valid_email, "Please enter a valid email address.")

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, v):
        return _require(
            v,
            validators.is_long_enough_message,
            "Please enter a message (at least 10 characters).",
        )


def collect_errors(exc: ValidationError) -> List[FieldError]:
    """Flatten a ValidationError into one FieldError per failing field."""
    errors: List[FieldError] = []
    seen = set()
    for error in exc.errors():
        field = str(error["loc"][0]) if error.get("loc") else "__form__"
        if field in seen:
            continue
        seen.add(field)
        errors.append(FieldError(field=field, message=error["msg"]))
    return errors
