"""
Pump add/edit modal screen model.
"""
import re
from typing import Any

from playwright.sync_api import Locator

from .interaction_kit import InteractionKit, LayoutError

# (min, max) modal width as a share of the viewport width
TABLET_WIDTH_RATIO = (0.6, 0.8)
DESKTOP_WIDTH_RATIO = (0.4, 0.6)
MOBILE_MIN_WIDTH_RATIO = 0.9
MOBILE_MIN_HEIGHT_RATIO = 0.8

OUTSIDE_CLICK_POINT = (50, 50)

# Form field key -> (input test id, is a <select>)
FORM_FIELDS = {
    "name": ("pump-name-input", False),
    "type": ("pump-type-dropdown", True),
    "area": ("pump-area-dropdown", True),
    "latitude": ("pump-latitude-input", False),
    "longitude": ("pump-longitude-input", False),
    "flowRate": ("pump-flow-rate-input", False),
    "offset": ("pump-offset-input", False),
    "currentPressure": ("pump-current-pressure-input", False),
    "minPressure": ("pump-min-pressure-input", False),
    "maxPressure": ("pump-max-pressure-input", False),
}

# Normalised field name -> validation message test id
VALIDATION_FIELDS = {
    "name": "name-validation-error",
    "type": "type-validation-error",
    "area": "area-validation-error",
    "latitude": "latitude-validation-error",
    "longitude": "longitude-validation-error",
    "flowrate": "flow-rate-validation-error",
    "offset": "offset-validation-error",
    "pressure": "pressure-validation-error",
}


def normalise_field_name(field: str) -> str:
    """'flowRate', 'flow-rate', 'Flow Rate' and 'flow_rate' all become 'flowrate'."""
    return re.sub(r"[^a-z0-9]", "", field.lower())


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


class PumpEditModal:
    """Modal used both for "Add New Pump" and "Edit Pump"."""

    def __init__(self, kit: InteractionKit):
        self.kit = kit
        by_id = kit.by_test_id

        self.modal = by_id("pump-edit-modal")
        self.modal_title = by_id("modal-title")
        self.close_button = by_id("close-button")
        self.save_button = by_id("save-button")
        self.cancel_button = by_id("cancel-button")
        self.delete_button = by_id("delete-button")
        self.error_message = by_id("error-message")
        self.success_message = by_id("success-message")
        self.loading_spinner = by_id("loading-spinner")
        self.required_field_indicator = by_id("required-field-indicator")
        self.mobile_modal_overlay = by_id("mobile-modal-overlay")
        self.mobile_close_button = by_id("mobile-close-button")

        self.inputs = {key: by_id(test_id) for key, (test_id, _) in FORM_FIELDS.items()}
        self.validation_errors = {key: by_id(test_id) for key, test_id in VALIDATION_FIELDS.items()}

    @property
    def pump_name_input(self) -> Locator:
        return self.inputs["name"]

    # -------------------------------------------------------------------------
    # Opening and closing
    # -------------------------------------------------------------------------

    def wait_for_modal_to_open(self) -> None:
        self.kit.verify_element_visible(self.modal)
        self.kit.wait_for_element(self.pump_name_input)

    def wait_for_modal_to_close(self) -> None:
        self.kit.verify_element_hidden(self.modal)

    def close_modal(self) -> None:
        button = self.mobile_close_button if self.kit.is_mobile() else self.close_button
        self.kit.click_element(button)
        self.wait_for_modal_to_close()

    def close_modal_with_overlay(self) -> None:
        """Dismiss by tapping the overlay on mobile, clicking outside elsewhere."""
        if self.kit.is_mobile():
            self.kit.click_element(self.mobile_modal_overlay)
        else:
            self.kit.page.mouse.click(*OUTSIDE_CLICK_POINT)
        self.wait_for_modal_to_close()

    # -------------------------------------------------------------------------
    # Field entry
    # -------------------------------------------------------------------------

    def set_field(self, key: str, value: Any) -> None:
        if key not in FORM_FIELDS:
            raise ValueError(f"Unknown pump form field: {key}")
        _, is_select = FORM_FIELDS[key]
        if is_select:
            self.kit.select_dropdown_option(self.inputs[key], _as_text(value))
        else:
            self.kit.fill_input(self.inputs[key], _as_text(value))

    def enter_pump_name(self, name: str) -> None:
        self.set_field("name", name)

    def select_pump_type(self, pump_type: str) -> None:
        self.set_field("type", pump_type)

    def enter_pump_area(self, area: str) -> None:
        self.set_field("area", area)

    def enter_pump_latitude(self, latitude: float) -> None:
        self.set_field("latitude", latitude)

    def enter_pump_longitude(self, longitude: float) -> None:
        self.set_field("longitude", longitude)

    def enter_pump_flow_rate(self, flow_rate: str) -> None:
        self.set_field("flowRate", flow_rate)

    def enter_pump_offset(self, offset: float) -> None:
        self.set_field("offset", offset)

    def enter_pump_current_pressure(self, pressure: float) -> None:
        self.set_field("currentPressure", pressure)

    def enter_pump_min_pressure(self, pressure: float) -> None:
        self.set_field("minPressure", pressure)

    def enter_pump_max_pressure(self, pressure: float) -> None:
        self.set_field("maxPressure", pressure)

    # -------------------------------------------------------------------------
    # Form actions
    # -------------------------------------------------------------------------

    def fill_pump_form(self, pump: dict[str, Any]) -> None:
        """Fill every form field, in form order, from a camelCase pump dict."""
        for key in FORM_FIELDS:
            self.set_field(key, pump[key])

    def save_changes(self) -> None:
        """Click save and wait for the spinner to appear and then go away."""
        self.kit.click_element(self.save_button)
        self.kit.verify_element_visible(self.loading_spinner)
        self.kit.verify_element_hidden(self.loading_spinner)

    def cancel_changes(self) -> None:
        self.kit.click_element(self.cancel_button)
        self.wait_for_modal_to_close()

    def delete_pump(self) -> None:
        self.kit.click_element(self.delete_button)

    def create_new_pump(self, pump: dict[str, Any]) -> None:
        self.wait_for_modal_to_open()
        self.fill_pump_form(pump)
        self.save_changes()

    def edit_existing_pump(self, changes: dict[str, Any]) -> None:
        """Change only the supplied fields, then save.

        Fields set to None are left untouched; zero and empty string are
        written like any other value.
        """
        self.wait_for_modal_to_open()
        for key in FORM_FIELDS:
            if changes.get(key) is not None:
                self.set_field(key, changes[key])
        self.save_changes()

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_modal_opened(self) -> None:
        for locator in (self.modal, self.pump_name_input, self.save_button, self.cancel_button):
            self.kit.verify_element_visible(locator)

    def verify_modal_closed(self) -> None:
        self.wait_for_modal_to_close()

    def verify_modal_title(self, expected_title: str) -> None:
        self.kit.verify_element_contains_text(self.modal_title, expected_title)

    def verify_save_button_enabled(self) -> None:
        self.kit.verify_element_enabled(self.save_button)

    def verify_save_button_disabled(self) -> None:
        self.kit.verify_element_disabled(self.save_button)

    def verify_success_message(self, expected_message: str) -> None:
        self.kit.verify_element_visible(self.success_message)
        self.kit.verify_element_contains_text(self.success_message, expected_message)

    def verify_error_message(self, expected_message: str) -> None:
        self.kit.verify_element_visible(self.error_message)
        self.kit.verify_element_contains_text(self.error_message, expected_message)

    def validation_error_for(self, field: str) -> Locator:
        key = normalise_field_name(field)
        if key not in self.validation_errors:
            raise ValueError(f"Unknown field: {field}")
        return self.validation_errors[key]

    def verify_validation_error(self, field: str, expected_error: str) -> None:
        locator = self.validation_error_for(field)
        self.kit.verify_element_visible(locator)
        self.kit.verify_element_contains_text(locator, expected_error)

    def verify_required_fields(self) -> None:
        for indicator in self.required_field_indicator.all():
            self.kit.verify_element_visible(indicator)

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    def get_field_value(self, key: str) -> str:
        if key not in self.inputs:
            raise ValueError(f"Unknown pump form field: {key}")
        return self.inputs[key].input_value()

    def get_pump_name_value(self) -> str:
        return self.get_field_value("name")

    def get_pump_type_value(self) -> str:
        return self.get_field_value("type")

    def get_pump_area_value(self) -> str:
        return self.get_field_value("area")

    def get_pump_latitude_value(self) -> str:
        return self.get_field_value("latitude")

    def get_pump_longitude_value(self) -> str:
        return self.get_field_value("longitude")

    def get_pump_flow_rate_value(self) -> str:
        return self.get_field_value("flowRate")

    def get_pump_offset_value(self) -> str:
        return self.get_field_value("offset")

    def get_pump_current_pressure_value(self) -> str:
        return self.get_field_value("currentPressure")

    def get_pump_min_pressure_value(self) -> str:
        return self.get_field_value("minPressure")

    def get_pump_max_pressure_value(self) -> str:
        return self.get_field_value("maxPressure")

    def get_modal_title_text(self) -> str:
        return self.kit.get_text(self.modal_title)

    # -------------------------------------------------------------------------
    # Responsive layout
    # -------------------------------------------------------------------------

    def _modal_and_viewport(self) -> tuple[dict[str, float] | None, dict[str, int] | None]:
        return self.kit.element_box(self.modal), self.kit.viewport_size()

    def verify_mobile_layout(self) -> None:
        if not self.kit.is_mobile():
            return
        self.kit.verify_element_visible(self.mobile_modal_overlay)
        box, viewport = self._modal_and_viewport()
        if not (box and viewport):
            return
        if (
            box["width"] < viewport["width"] * MOBILE_MIN_WIDTH_RATIO
            or box["height"] < viewport["height"] * MOBILE_MIN_HEIGHT_RATIO
        ):
            raise LayoutError("Modal should be nearly full screen on mobile")

    def _verify_width_ratio(self, bounds: tuple[float, float], device: str) -> None:
        box, viewport = self._modal_and_viewport()
        if not (box and viewport):
            return
        low, high = bounds
        if not viewport["width"] * low <= box["width"] <= viewport["width"] * high:
            raise LayoutError(
                f"Modal width {box['width']}px is not appropriate for {device} layout"
            )

    def verify_tablet_layout(self) -> None:
        if self.kit.is_tablet():
            self._verify_width_ratio(TABLET_WIDTH_RATIO, "tablet")

    def verify_desktop_layout(self) -> None:
        if not self.kit.is_desktop():
            return
        self.kit.verify_element_visible(self.delete_button)
        self._verify_width_ratio(DESKTOP_WIDTH_RATIO, "desktop")

    # -------------------------------------------------------------------------
    # Keyboard
    # -------------------------------------------------------------------------

    def navigate_with_tab(self) -> None:
        self.kit.press_key("Tab")

    def submit_with_enter(self) -> None:
        self.kit.press_key("Enter")

    def cancel_with_escape(self) -> None:
        self.kit.press_key("Escape")
        self.wait_for_modal_to_close()
