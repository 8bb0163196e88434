"""
Given/When/Then steps for browsing the pumps overview.
"""
import re

from ..config import Settings, get_settings
from ..helpers.timing import measure_action_time
from ..pages.interaction_kit import InteractionKit
from ..pages.login_page import LoginPage
from ..pages.pumps_overview_page import PumpsOverviewPage

PUMPS_URL = "**/pumps"
PUMPS_URL_PATTERN = re.compile(r".*/pumps$")
PUMP_DETAILS_URL_PATTERN = re.compile(r".*/pump/\d+")

PAGE_RESPONSE_LIMIT_MS = 5000


class PumpOverviewSteps:
    def __init__(self, kit: InteractionKit, settings: Settings | None = None):
        self.kit = kit
        self.settings = settings or get_settings()
        self.overview = PumpsOverviewPage(kit)
        self.login_page = LoginPage(kit)
        self.context_menu = kit.by_test_id("context-menu")
        self.success_message = kit.by_test_id("success-message")
        self.error_message = kit.by_test_id("error-message")

    def credentials_for(self, user_type: str) -> tuple[str, str]:
        """Username and password for 'pump engineer', 'system admin' or anyone else."""
        s = self.settings
        if user_type == "pump engineer":
            return s.engineer_username, s.engineer_password
        if user_type == "system admin":
            return s.admin_username, s.admin_password
        return s.test_username, s.test_password

    # -------------------------------------------------------------------------
    # Given
    # -------------------------------------------------------------------------

    def given_i_am_logged_in_as(self, user_type: str) -> None:
        self.login_page.navigate_to_login()
        username, password = self.credentials_for(user_type)
        self.login_page.login(username, password)
        self.kit.wait_for_url(PUMPS_URL)

    def given_i_am_on_the_pumps_overview_page(self) -> None:
        self.overview.navigate_to_pumps_overview()

    def given_there_are_multiple_pumps_in_the_system(self) -> None:
        """No-op: seed data through the API fixtures instead."""

    def given_there_are_no_pumps_in_the_system(self) -> None:
        """No-op: seed data through the API fixtures instead."""

    # -------------------------------------------------------------------------
    # When
    # -------------------------------------------------------------------------

    def when_i_view_the_pumps_overview(self) -> None:
        self.kit.wait_for_page_load()

    def when_i_search_for_pump(self, pump_name: str) -> None:
        self.overview.search_pumps(pump_name)

    def when_i_clear_the_search(self) -> None:
        self.overview.clear_search()

    # The overview has a single filter dropdown covering type, status and area
    def when_i_filter_by_status(self, status: str) -> None:
        self.overview.filter_pumps_by_type(status)

    def when_i_filter_by_location(self, location: str) -> None:
        self.overview.filter_pumps_by_type(location)

    def when_i_filter_by_type(self, pump_type: str) -> None:
        self.overview.filter_pumps_by_type(pump_type)

    def when_i_sort_by(self, column: str, order: str) -> None:
        self.overview.sort_pumps(f"{column} {order}")

    def when_i_change_the_view_to(self, view_type: str) -> None:
        """No-op: the overview has a single card view."""

    def when_i_apply_multiple_filters(self) -> None:
        self.overview.filter_pumps_by_type("Active")

    def when_i_select_multiple_pumps(self, count: int) -> None:
        """No-op: bulk selection is not available in the UI."""

    def when_i_click_on_bulk_actions(self) -> None:
        """No-op: bulk selection is not available in the UI."""

    def when_i_choose_from_bulk_actions(self, action: str) -> None:
        """No-op: bulk selection is not available in the UI."""

    def when_i_confirm_the_bulk_action(self) -> None:
        """No-op: bulk selection is not available in the UI."""

    def when_i_click_refresh(self) -> None:
        self.overview.refresh_pumps_list()

    def when_i_navigate_to_page(self, page_number: int) -> None:
        for _ in range(1, page_number):
            self.overview.go_to_next_page()

    def when_i_change_page_size_to(self, page_size: int) -> None:
        self.overview.change_items_per_page(str(page_size))

    def when_i_hover_over_pump(self, pump_name: str) -> None:
        self.overview.pump_card(pump_name).hover()

    def when_i_right_click_on_pump(self, pump_name: str) -> None:
        self.overview.pump_card(pump_name).click(button="right")

    def when_i_double_click_on_pump(self, pump_name: str) -> None:
        self.overview.pump_card(pump_name).dblclick()

    def when_i_use_keyboard_shortcuts_to_navigate(self) -> None:
        self.kit.press_key("Tab")
        self.kit.press_key("Enter")

    def when_the_system_is_under_load(self) -> None:
        """No-op: load is generated outside the browser session."""

    # -------------------------------------------------------------------------
    # Then
    # -------------------------------------------------------------------------

    def then_i_should_see_a_list_of_pumps(self) -> None:
        self.overview.verify_pumps_overview_page_loaded()
        assert self.overview.get_pump_count() > 0, "Expected at least one pump card"

    def then_i_should_see_pump_information_including_name_status_location_and_type(self) -> None:
        names = self.overview.get_all_pump_names()
        assert names, "Expected at least one pump name"
        self.overview.verify_pump_exists(names[0])

    def then_i_should_see_only_pumps_matching(self, search_term: str) -> None:
        term = search_term.lower()
        for name in self.overview.get_all_pump_names():
            assert term in name.lower(), f"Pump {name!r} does not match {search_term!r}"

    def then_i_should_see_all_pumps(self) -> None:
        self.overview.verify_pumps_overview_page_loaded()
        assert self.overview.get_search_input_value() == "", "Search input is not empty"

    def _assert_filter(self, expected: str) -> None:
        actual = self.overview.get_current_filter_value()
        assert actual == expected, f"Expected filter {expected!r}, got {actual!r}"

    def then_i_should_see_only_pumps_with_status(self, status: str) -> None:
        self._assert_filter(status)

    def then_i_should_see_only_pumps_in_location(self, location: str) -> None:
        self._assert_filter(location)

    def then_i_should_see_only_pumps_of_type(self, pump_type: str) -> None:
        self._assert_filter(pump_type)

    def then_i_should_see_pumps_sorted_by(self, column: str, order: str) -> None:
        sort_value = self.overview.get_current_sort_value()
        assert column in sort_value and order in sort_value, (
            f"Sort {sort_value!r} does not reflect {column} {order}"
        )

    def then_i_should_see_the_pumps_in_view(self, view_type: str) -> None:
        """No-op: the overview has a single card view."""

    def then_i_should_see_only_pumps_matching_all_applied_filters(self) -> None:
        assert self.overview.get_current_filter_value(), "No filter is applied"

    def then_i_should_see_pumps_selected(self, count: int) -> None:
        """No-op: bulk selection is not available in the UI."""

    def then_i_should_see_bulk_action_options(self) -> None:
        """No-op: bulk selection is not available in the UI."""

    def then_the_selected_pumps_should_be(self, action: str) -> None:
        """No-op: bulk selection is not available in the UI."""

    def then_i_should_see_a_success_message(self, message: str) -> None:
        self.kit.verify_element_visible(self.success_message)
        self.kit.verify_element_contains_text(self.success_message, message)

    def then_a_file_should_be_downloaded(self) -> None:
        """No-op: downloads are covered by the export API tests."""

    def then_the_data_should_be_refreshed(self) -> None:
        self.overview.verify_pumps_overview_page_loaded()

    def then_i_should_see_page_of_results(self, page_number: int) -> None:
        """No-op: the current page number is not rendered."""

    def then_i_should_see_pumps_per_page(self, page_size: int) -> None:
        count = self.overview.get_pump_count()
        assert count <= page_size, f"Expected at most {page_size} pumps, found {count}"

    def then_i_should_see_additional_pump_details(self) -> None:
        """No-op: hover details are not rendered."""

    def then_i_should_see_a_context_menu(self) -> None:
        self.kit.verify_element_visible(self.context_menu)

    def then_i_should_be_taken_to_the_pump_details_page(self) -> None:
        self.kit.verify_url(PUMP_DETAILS_URL_PATTERN)

    def then_i_should_be_able_to_navigate_without_using_mouse(self) -> None:
        self.kit.verify_url(PUMPS_URL_PATTERN)

    def then_the_system_should_respond_within_acceptable_time_limits(self) -> None:
        elapsed_ms = self.kit.page.evaluate("() => performance.now()")
        assert elapsed_ms < PAGE_RESPONSE_LIMIT_MS, (
            f"Page has been loading for {elapsed_ms:.0f}ms, limit is {PAGE_RESPONSE_LIMIT_MS}ms"
        )

    def then_i_should_see_an_empty_state_message(self) -> None:
        self.overview.verify_no_data_message()

    def then_i_should_see_an_error_message(self, message: str) -> None:
        self.kit.verify_element_visible(self.error_message)
        self.kit.verify_element_contains_text(self.error_message, message)

    def then_the_page_should_load_within_seconds(self, seconds: float) -> None:
        elapsed = measure_action_time(self.kit.wait_for_page_load)
        assert elapsed < seconds, f"Page load took {elapsed:.2f}s, limit is {seconds}s"

    def then_the_mobile_layout_should_be_user_friendly(self) -> None:
        self.overview.verify_mobile_layout()
