"""
Given/When/Then steps for creating, editing and deleting pumps in the UI.
"""
from typing import Any

from ..factories.data_factory import TestDataFactory
from ..helpers.timing import measure_action_time
from ..pages.interaction_kit import InteractionKit
from ..pages.pump_edit_modal import PumpEditModal
from ..pages.pumps_overview_page import PumpsOverviewPage

ADD_PUMP_TITLE = "Add New Pump"
EDIT_PUMP_TITLE = "Edit Pump"

PUMP_CREATED_MESSAGE = "Pump created successfully"
PUMP_UPDATED_MESSAGE = "Pump updated successfully"
PUMP_DELETED_MESSAGE = "Pump deleted successfully"

MODAL_RESPONSE_LIMIT = 3.0  # seconds


class PumpManagementSteps:
    def __init__(self, kit: InteractionKit, factory: TestDataFactory | None = None):
        self.kit = kit
        self.factory = factory or TestDataFactory()
        self.overview = PumpsOverviewPage(kit)
        self.modal = PumpEditModal(kit)
        self.confirm_delete_button = kit.by_test_id("confirm-delete-button")
        self.cancel_delete_button = kit.by_test_id("cancel-delete-button")
        self.delete_confirmation_dialog = kit.by_test_id("delete-confirmation-dialog")
        self.confirmation_dialog = kit.by_test_id("confirmation-dialog")
        # Last pump entered through the form, for list checks
        self.entered_pump: dict[str, Any] | None = None

    # -------------------------------------------------------------------------
    # Given
    # -------------------------------------------------------------------------

    def given_i_am_on_the_pumps_overview_page(self) -> None:
        self.overview.navigate_to_pumps_overview()

    def given_i_have_selected_a_pump(self, pump_name: str) -> None:
        self.overview.verify_pump_exists(pump_name)

    def given_there_is_an_existing_pump(self, pump_name: str) -> None:
        self.overview.verify_pump_exists(pump_name)

    # -------------------------------------------------------------------------
    # When
    # -------------------------------------------------------------------------

    def when_i_click_the_add_new_pump_button(self) -> None:
        self.overview.click_new_pump_button()

    def when_i_click_the_edit_button_for_pump(self, pump_name: str) -> None:
        self.overview.click_edit_pump(pump_name)

    def when_i_click_the_delete_button_for_pump(self, pump_name: str) -> None:
        self.overview.click_delete_pump(pump_name)

    def when_i_fill_in_the_pump_details_with_valid_data(self, pump: dict[str, Any] | None = None) -> dict[str, Any]:
        pump = pump or self.factory.create_pump()
        self.modal.fill_pump_form(pump)
        self.entered_pump = pump
        return pump

    def when_i_fill_in_the_pump_details_with_invalid_data(self) -> None:
        self.modal.enter_pump_name("")
        self.modal.enter_pump_flow_rate("-100")

    def when_i_leave_required_fields_empty(self) -> None:
        self.modal.enter_pump_name("")
        self.modal.enter_pump_flow_rate("")

    def when_i_enter_a_pump_name_that_already_exists(self, existing_name: str = "Existing Pump Name") -> None:
        self.modal.enter_pump_name(existing_name)

    def when_i_enter_an_invalid_flow_rate_value(self) -> None:
        self.modal.enter_pump_flow_rate("invalid")

    def when_i_select_an_invalid_location(self) -> None:
        self.modal.enter_pump_area("Invalid Area")

    def when_i_update_the_pump_information(self) -> dict[str, Any]:
        pump = self.factory.create_pump()
        changes = {"name": f"Updated {pump['name']}", "area": f"Updated {pump['area']}"}
        self.modal.enter_pump_name(changes["name"])
        self.modal.enter_pump_area(changes["area"])
        self.entered_pump = changes
        return changes

    def when_i_click_save(self) -> None:
        self.modal.save_changes()

    def when_i_click_cancel(self) -> None:
        self.modal.cancel_changes()

    def when_i_click_delete(self) -> None:
        self.modal.delete_pump()

    def when_i_confirm_the_deletion(self) -> None:
        self.kit.click_element(self.confirm_delete_button)

    def when_i_cancel_the_deletion(self) -> None:
        self.kit.click_element(self.cancel_delete_button)

    def when_i_try_to_save_without_changing_anything(self) -> None:
        self.modal.save_changes()

    def when_i_navigate_away_without_saving(self) -> None:
        self.kit.page.go_back()

    def when_i_use_keyboard_navigation_to_complete_the_form(self) -> None:
        keyboard = self.kit.page.keyboard
        keyboard.press("Tab")
        keyboard.type("Test Pump")
        keyboard.press("Tab")
        keyboard.press("ArrowDown")
        keyboard.press("Enter")

    def when_i_try_to_create_multiple_pumps_simultaneously(self) -> None:
        self.when_i_click_the_add_new_pump_button()
        self.when_i_fill_in_the_pump_details_with_valid_data()
        self.when_i_click_save()

    def when_the_system_is_under_heavy_load(self) -> None:
        """No-op: load is generated outside the browser session."""

    # -------------------------------------------------------------------------
    # Then
    # -------------------------------------------------------------------------

    def then_the_add_new_pump_modal_should_open(self) -> None:
        self.modal.verify_modal_opened()
        self.modal.verify_modal_title(ADD_PUMP_TITLE)

    def then_the_edit_pump_modal_should_open(self) -> None:
        self.modal.verify_modal_opened()
        self.modal.verify_modal_title(EDIT_PUMP_TITLE)

    def then_the_delete_confirmation_dialog_should_appear(self) -> None:
        self.kit.verify_element_visible(self.delete_confirmation_dialog)

    def then_the_new_pump_should_be_created_successfully(self) -> None:
        self.modal.verify_success_message(PUMP_CREATED_MESSAGE)
        self.modal.verify_modal_closed()

    def then_the_pump_should_be_updated_successfully(self) -> None:
        self.modal.verify_success_message(PUMP_UPDATED_MESSAGE)
        self.modal.verify_modal_closed()

    def then_the_pump_should_be_deleted_successfully(self) -> None:
        self.modal.verify_success_message(PUMP_DELETED_MESSAGE)

    def then_i_should_see_validation_errors(self) -> None:
        self.modal.verify_required_fields()

    def then_i_should_see_an_error_message(self, message: str) -> None:
        self.modal.verify_error_message(message)

    def then_the_save_button_should_be_disabled(self) -> None:
        self.modal.verify_save_button_disabled()

    def then_the_modal_should_close(self) -> None:
        self.modal.verify_modal_closed()

    def then_the_original_data_should_be_preserved(self) -> None:
        self.overview.verify_pumps_overview_page_loaded()

    def then_the_pump_should_still_exist(self, pump_name: str | None = None) -> None:
        if pump_name:
            self.overview.verify_pump_exists(pump_name)
            return
        assert self.overview.get_pump_count() > 0, "Expected at least one pump in the list"

    def then_the_pump_should_not_be_created(self) -> None:
        self.modal.verify_modal_opened()

    def then_i_should_see_a_confirmation_dialog(self) -> None:
        self.kit.verify_element_visible(self.confirmation_dialog)

    def then_i_should_be_able_to_complete_the_form_using_only_keyboard(self) -> None:
        self.modal.verify_modal_opened()

    def then_the_system_should_handle_multiple_operations_gracefully(self) -> None:
        self.kit.verify_element_hidden(self.modal.error_message)

    def then_the_system_should_respond_within_acceptable_time_limits(self) -> None:
        elapsed = measure_action_time(self.modal.verify_modal_opened)
        assert elapsed < MODAL_RESPONSE_LIMIT, (
            f"Modal took {elapsed:.2f}s to respond, limit is {MODAL_RESPONSE_LIMIT}s"
        )

    def then_the_new_pump_should_appear_in_the_list(self) -> None:
        self.overview.verify_pumps_overview_page_loaded()
        if self.entered_pump and self.entered_pump.get("name"):
            self.overview.verify_pump_exists(self.entered_pump["name"])
        else:
            assert self.overview.get_pump_count() > 0, "Expected at least one pump in the list"

    def then_the_updated_information_should_be_displayed(self) -> None:
        self.overview.verify_pumps_overview_page_loaded()

    def then_the_pump_should_no_longer_appear_in_the_list(self, pump_name: str | None = None) -> None:
        self.overview.verify_pumps_overview_page_loaded()
        if pump_name:
            self.overview.verify_pump_does_not_exist(pump_name)

    def then_the_form_fields_should_be_accessible_via_keyboard(self) -> None:
        self.modal.navigate_with_tab()

    def then_the_mobile_layout_should_be_optimized(self) -> None:
        self.modal.verify_mobile_layout()

    def then_the_tablet_layout_should_be_optimized(self) -> None:
        self.modal.verify_tablet_layout()
