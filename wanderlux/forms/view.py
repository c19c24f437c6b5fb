"""Form view interface used by the form controllers.

Controllers never touch a rendering surface directly. They read and write
through a ``FormView``; the web layer renders whatever state the view holds.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Mapping, Optional


class FormView(ABC):
    """Abstract base class for a rendered form."""

    def __init__(self, form_id: str):
        self.form_id = form_id

    @abstractmethod
    def has_field(self, name: str) -> bool:
        """Whether the form exposes an input with this name."""
        pass

    @abstractmethod
    def get_field_value(self, name: str) -> str:
        """Raw value of an input, ``""`` if the input is absent."""
        pass

    @abstractmethod
    def set_field_error(self, name: str, text: str) -> bool:
        """
        Write an error next to a field.

        Args:
            name: Field name
            text: Message, or ``""`` to clear the slot

        Returns:
            False if the form has no error slot for this field
        """
        pass

    @abstractmethod
    def set_result(self, text: str) -> None:
        """Write the form-level result/success text."""
        pass

    @abstractmethod
    def clear_messages(self) -> None:
        """Clear every field error and the result text."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Empty every input, as a browser form reset would."""
        pass


class InMemoryFormView(FormView):
    """Form view backed by plain dictionaries.

    Used by the web layer to carry one request's form state into a template,
    and by tests.
    """

    def __init__(
        self,
        form_id: str,
        values: Optional[Mapping[str, str]] = None,
        error_slots: Optional[Iterable[str]] = None,
        result: str = "",
    ):
        super().__init__(form_id)
        self.values: Dict[str, str] = dict(values or {})
        # Every input gets an error slot unless told otherwise
        slots = self.values.keys() if error_slots is None else error_slots
        self.errors: Dict[str, str] = {name: "" for name in slots}
        self.result = result

    def has_field(self, name: str) -> bool:
        return name in self.values

    def get_field_value(self, name: str) -> str:
        value = self.values.get(name)
        return "" if value is None else str(value)

    def set_field_error(self, name: str, text: str) -> bool:
        if name not in self.errors:
            return False
        self.errors[name] = text
        return True

    def set_result(self, text: str) -> None:
        self.result = text

    def clear_messages(self) -> None:
        for name in self.errors:
            self.errors[name] = ""
        self.result = ""

    def reset(self) -> None:
        for name in self.values:
            self.values[name] = ""

    @property
    def messages(self) -> Dict[str, str]:
        """Non-empty field errors only."""
        return {name: text for name, text in self.errors.items() if text}


class Page:
    """A loaded page and the forms it exposes, keyed by form id."""

    def __init__(self, forms: Optional[Mapping[str, FormView]] = None):
        self.forms: Dict[str, FormView] = dict(forms or {})

    def get_form(self, form_id: str) -> Optional[FormView]:
        return self.forms.get(form_id)
