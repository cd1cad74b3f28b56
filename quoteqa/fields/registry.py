from typing import TYPE_CHECKING, Dict, List, Optional, Type, TypeVar

from quoteqa.state import PageName

if TYPE_CHECKING:
    from quoteqa.fields.base import FieldController
    from quoteqa.pages.base import PageValidator

ControllerT = TypeVar("ControllerT", bound="FieldController")


class UnknownControlError(KeyError):
    """No controller or page validator is registered under the given key."""


class FieldRegistry:
    """Holds the single controller of each control type and the validator of
    each page for the lifetime of a suite."""

    def __init__(self):
        self._controllers: Dict[type, "FieldController"] = {}
        self._by_field_name: Dict[str, "FieldController"] = {}
        self._pages: Dict[PageName, "PageValidator"] = {}

    def register_controller(self, controller: "FieldController") -> "FieldController":
        self._controllers[type(controller)] = controller
        self._by_field_name[controller.FIELD_NAME] = controller
        return controller

    def register_page(self, validator: "PageValidator") -> "PageValidator":
        self._pages[validator.PAGE_NAME] = validator
        return validator

    def controller(self, controller_type: Type[ControllerT]) -> ControllerT:
        try:
            return self._controllers[controller_type]
        except KeyError:
            raise UnknownControlError(f"Controller not registered: {controller_type.__name__}") from None

    def controller_for_field(self, field_name: str) -> "FieldController":
        try:
            return self._by_field_name[field_name]
        except KeyError:
            raise UnknownControlError(f"No controller for field '{field_name}'") from None

    def find_page_validator(self, page_name: Optional[PageName]) -> Optional["PageValidator"]:
        return self._pages.get(page_name) if page_name is not None else None

    def page_validator(self, page_name: PageName) -> "PageValidator":
        validator = self.find_page_validator(page_name)
        if validator is None:
            raise UnknownControlError(f"No validator for page '{page_name}'")
        return validator

    @property
    def controllers(self) -> List["FieldController"]:
        return list(self._controllers.values())
