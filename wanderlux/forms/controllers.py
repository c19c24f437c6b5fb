"""Form controllers for the calculator, appointment and contact forms.

Every controller runs the same cycle on submit:

    idle -> validating -> accepted | rejected -> idle

Messages from the previous submission are cleared first, then every field is
validated (no short-circuiting) and either all errors are shown or the
success action runs. Controllers keep no per-submission state, so one
instance can serve any number of views.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Type

from pydantic import BaseModel, ValidationError

from wanderlux.config import Settings, get_settings
from wanderlux.forms.schemas import (
    AppointmentForm,
    CalculatorForm,
    ContactForm,
    FieldError,
    FormState,
    Outcome,
    TripRequest,
    collect_errors,
)
from wanderlux.forms.view import FormView, Page
from wanderlux.pricing import PRICING_TABLE, PricingTable, estimate
from wanderlux.utils.formatting import capitalize_first, format_currency, pluralize

logger = logging.getLogger(__name__)


class FormController(ABC):
    """Base class for a form's submit handling."""

    form_id: str
    form_model: Type[BaseModel]
    # Inputs read on submit
    fields: Sequence[str] = ()
    # Inputs the page must expose before the controller attaches
    required_inputs: Sequence[str] = ()
    # Result text shown alongside field errors, if any
    rejection_summary: Optional[str] = None

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def attach(self, view: FormView) -> bool:
        """Check the view exposes the required inputs.

        Returns:
            bool: True if the controller should handle this view's events.
        """
        missing = [name for name in self.required_inputs if not view.has_field(name)]
        if missing:
            self.on_missing_inputs(view, missing)
            return False
        return True

    def on_missing_inputs(self, view: FormView, missing: List[str]) -> None:
        """Default policy: do not attach, say nothing on the page."""
        logger.debug(f"Skipping {self.form_id} form, missing inputs: {missing}")

    def read_fields(self, view: FormView) -> Dict[str, str]:
        return {name: view.get_field_value(name) for name in self.fields}

    def handle_submit(self, view: FormView) -> Outcome:
        """Handle one submit event for this form.

        Args:
            view: The submitted form.

        Returns:
            Outcome: Terminal state, every field error, and the result text.
        """
        view.clear_messages()
        logger.debug(f"{self.form_id}: {FormState.IDLE.value} -> {FormState.VALIDATING.value}")

        try:
            form = self.form_model(**self.read_fields(view))
        except ValidationError as e:
            errors = collect_errors(e)
            result = self.show_errors(view, errors)
            logger.info(
                f"{self.form_id} submission rejected: "
                f"{', '.join(error.field for error in errors)}"
            )
            return Outcome(
                form=self.form_id,
                state=FormState.REJECTED,
                errors=errors,
                result=result,
            )

        outcome = self.on_accept(view, form)
        logger.info(f"{self.form_id} submission accepted")
        return outcome

    def show_errors(self, view: FormView, errors: List[FieldError]) -> Optional[str]:
        """Write each error to its slot.

        Messages whose field has no error slot are folded into the result
        text so nothing is lost on pages without per-field slots.

        Returns:
            Optional[str]: Result text written, if any.
        """
        unslotted = [
            error.message
            for error in errors
            if not view.set_field_error(error.field, error.message)
        ]
        parts = ([self.rejection_summary] if self.rejection_summary else []) + unslotted
        if not parts:
            return None
        result = " ".join(parts)
        view.set_result(result)
        return result

    @abstractmethod
    def on_accept(self, view: FormView, form: BaseModel) -> Outcome:
        """Run the success action for a fully valid submission."""
        pass


class CalculatorController(FormController):
    """Trip cost calculator."""

    form_id = "calculator"
    form_model = CalculatorForm
    fields = ("destination", "travellers", "days", "style")
    # Style is a radio group; an unchecked group is reported as a field error
    required_inputs = ("destination", "travellers", "days")
    rejection_summary = "Please correct the highlighted fields and try again."

    PLACEHOLDER = "Fill in the form and click Calculate to see your estimate."
    MISSING_INPUTS = (
        "Calculator inputs are missing. Ensure calculator.html contains destination, "
        "travellers, days, and travel style inputs."
    )

    def __init__(self, settings: Optional[Settings] = None, table: PricingTable = PRICING_TABLE):
        super().__init__(settings)
        self.table = table

    def on_missing_inputs(self, view: FormView, missing: List[str]) -> None:
        logger.warning(f"Calculator form is missing inputs: {missing}")
        view.set_result(self.MISSING_INPUTS)

    def on_accept(self, view: FormView, form: CalculatorForm) -> Outcome:
        request = form.to_trip_request()
        total = estimate(request, self.table)
        message = self.describe(request, total)

        # Inputs are left as entered so the user can tweak and recalculate
        view.set_result(message)
        return Outcome(
            form=self.form_id,
            state=FormState.ACCEPTED,
            result=message,
            total=total,
        )

    def describe(self, request: TripRequest, total: int) -> str:
        """Build the estimate sentence shown in the result slot."""
        return (
            f"Estimated cost for {pluralize(request.traveller_count, 'traveller')} "
            f"to {capitalize_first(request.destination)} "
            f"for {pluralize(request.day_count, 'day')}: "
            f"{format_currency(total, self.settings)} – "
            f"{self.table.style_labels[request.style]} Travel Package."
        )

    def handle_reset(self, view: FormView) -> Outcome:
        """Handle the calculator's reset event."""
        view.clear_messages()
        view.set_result(self.PLACEHOLDER)
        return Outcome(form=self.form_id, state=FormState.IDLE, result=self.PLACEHOLDER)


class _AcknowledgingController(FormController):
    """Forms whose success is a canned acknowledgement.

    No data leaves the page; the fields are cleared to simulate a sent form.
    """

    acknowledgement: str

    def on_accept(self, view: FormView, form: BaseModel) -> Outcome:
        view.set_result(self.acknowledgement)
        view.reset()
        return Outcome(
            form=self.form_id,
            state=FormState.ACCEPTED,
            result=self.acknowledgement,
        )


class AppointmentController(_AcknowledgingController):
    """Appointment request form."""

    form_id = "appointment"
    form_model = AppointmentForm
    fields = ("name", "email", "phone", "date", "message")
    required_inputs = fields
    acknowledgement = (
        "Thank you. Your appointment request has been received. "
        "A consultant will contact you shortly."
    )


class ContactController(_AcknowledgingController):
    """Contact message form."""

    form_id = "contact"
    form_model = ContactForm
    fields = ("name", "email", "message")
    required_inputs = fields
    acknowledgement = "Thanks for your message. We will respond as soon as possible."


CONTROLLERS: Sequence[Type[FormController]] = (
    CalculatorController,
    AppointmentController,
    ContactController,
)


def bind_forms(page: Page, settings: Optional[Settings] = None) -> Dict[str, FormController]:
    """Attach a controller to every form the page exposes.

    Forms absent from the page are skipped. Forms missing inputs are not
    attached either; the calculator reports that on the page.

    Args:
        page: Loaded page.
        settings: Settings handed to each controller.

    Returns:
        Dict[str, FormController]: Attached controllers keyed by form id.
    """
    attached: Dict[str, FormController] = {}
    for controller_cls in CONTROLLERS:
        view = page.get_form(controller_cls.form_id)
        if view is None:
            continue
        controller = controller_cls(settings)
        if controller.attach(view):
            attached[controller.form_id] = controller
    return attached
