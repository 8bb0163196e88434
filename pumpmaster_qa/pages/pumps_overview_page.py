"""
Pumps overview screen model: list, search, filter, sort, pagination and
per-card actions.
"""
from playwright.sync_api import Locator

from .interaction_kit import InteractionKit, LayoutError

MOBILE_CARD_MAX_WIDTH_RATIO = 0.95
PULL_TO_REFRESH_START_Y = 100
PULL_TO_REFRESH_STEPS = 10

# True once the loading spinner is gone or hidden with an inline style
SPINNER_GONE_JS = """() => {
    const spinner = document.querySelector('[data-testid="loading-spinner"]');
    return !spinner || (spinner.getAttribute('style') || '').includes('display: none');
}"""


class PumpsOverviewPage:
    PATH = "/pumps"

    def __init__(self, kit: InteractionKit):
        self.kit = kit
        by_id = kit.by_test_id

        # Toolbar
        self.new_pump_button = by_id("new-pump-button")
        self.search_input = by_id("search-input")
        self.filter_dropdown = by_id("filter-dropdown")
        self.sort_dropdown = by_id("sort-dropdown")
        self.refresh_button = by_id("refresh-button")

        # List
        self.pumps_list = by_id("pumps-list")
        self.pump_cards = by_id("pump-card")
        self.loading_spinner = by_id("loading-spinner")
        self.no_data_message = by_id("no-data-message")

        # Pagination
        self.pagination_container = by_id("pagination-container")
        self.previous_page_button = by_id("previous-page-button")
        self.next_page_button = by_id("next-page-button")
        self.items_per_page_dropdown = by_id("items-per-page-dropdown")
        self.total_items_count = by_id("total-items-count")

        # Mobile
        self.mobile_filter_toggle = by_id("mobile-filter-toggle")
        self.mobile_sort_toggle = by_id("mobile-sort-toggle")
        self.pull_to_refresh_indicator = by_id("pull-to-refresh-indicator")

        # Card fields
        self.pump_names = by_id("pump-name")

    def pump_card(self, pump_name: str) -> Locator:
        """The card whose text contains pump_name."""
        return self.pump_cards.filter(has_text=pump_name)

    def wait_for_search_results(self) -> None:
        self.kit.page.wait_for_function(SPINNER_GONE_JS)

    # -------------------------------------------------------------------------
    # Navigation and toolbar actions
    # -------------------------------------------------------------------------

    def navigate_to_pumps_overview(self) -> None:
        self.kit.navigate(self.PATH)
        self.kit.verify_element_visible(self.pumps_list)

    def click_new_pump_button(self) -> None:
        self.kit.click_element(self.new_pump_button)

    def search_pumps(self, search_term: str) -> None:
        self.kit.fill_input(self.search_input, search_term)
        self.kit.press_key("Enter")
        self.wait_for_search_results()

    def clear_search(self) -> None:
        self.search_pumps("")

    def filter_pumps_by_type(self, pump_type: str) -> None:
        self.kit.select_dropdown_option(self.filter_dropdown, pump_type)
        self.wait_for_search_results()

    def sort_pumps(self, sort_option: str) -> None:
        self.kit.select_dropdown_option(self.sort_dropdown, sort_option)
        self.wait_for_search_results()

    def refresh_pumps_list(self) -> None:
        self.kit.click_element(self.refresh_button)
        self.wait_for_search_results()

    # -------------------------------------------------------------------------
    # Mobile actions
    # -------------------------------------------------------------------------

    def toggle_mobile_filter(self) -> None:
        if self.kit.is_mobile():
            self.kit.click_element(self.mobile_filter_toggle)

    def toggle_mobile_sort(self) -> None:
        if self.kit.is_mobile():
            self.kit.click_element(self.mobile_sort_toggle)

    def pull_to_refresh(self) -> None:
        """Drag from near the top to mid-screen; mobile only."""
        if not self.kit.is_mobile():
            return
        viewport = self.kit.viewport_size()
        x = viewport["width"] / 2
        mouse = self.kit.page.mouse
        mouse.move(x, PULL_TO_REFRESH_START_Y)
        mouse.down()
        mouse.move(x, viewport["height"] / 2, steps=PULL_TO_REFRESH_STEPS)
        mouse.up()
        self.wait_for_search_results()

    # -------------------------------------------------------------------------
    # Card actions
    # -------------------------------------------------------------------------

    def click_edit_pump(self, pump_name: str) -> None:
        self.kit.click_element(self.pump_card(pump_name).get_by_test_id("edit-pump-button"))

    def click_delete_pump(self, pump_name: str) -> None:
        self.kit.click_element(self.pump_card(pump_name).get_by_test_id("delete-pump-button"))

    def click_view_pump_details(self, pump_name: str) -> None:
        self.kit.click_element(
            self.pump_card(pump_name).get_by_test_id("view-pump-details-button")
        )

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------

    def go_to_next_page(self) -> None:
        """Advance one page; no-op on the last page."""
        if self.kit.is_element_enabled(self.next_page_button):
            self.kit.click_element(self.next_page_button)
            self.wait_for_search_results()

    def go_to_previous_page(self) -> None:
        if self.kit.is_element_enabled(self.previous_page_button):
            self.kit.click_element(self.previous_page_button)
            self.wait_for_search_results()

    def change_items_per_page(self, items_per_page: str) -> None:
        self.kit.select_dropdown_option(self.items_per_page_dropdown, items_per_page)
        self.wait_for_search_results()

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_pumps_overview_page_loaded(self) -> None:
        self.kit.verify_element_visible(self.new_pump_button)
        self.kit.verify_element_visible(self.search_input)
        self.kit.verify_element_visible(self.pumps_list)

    def verify_pagination_visible(self) -> None:
        self.kit.verify_element_visible(self.pagination_container)

    def verify_pump_exists(self, pump_name: str) -> None:
        self.kit.verify_element_visible(self.pump_card(pump_name))

    def verify_pump_does_not_exist(self, pump_name: str) -> None:
        self.kit.verify_element_hidden(self.pump_card(pump_name))

    def verify_search_results(self, expected_count: int) -> None:
        self.kit.verify_element_count(self.pump_cards, expected_count)

    def verify_no_data_message(self) -> None:
        self.kit.verify_element_visible(self.no_data_message)

    def verify_pump_details(self, pump_name: str, expected_type: str, expected_status: str) -> None:
        card = self.pump_card(pump_name)
        self.kit.verify_element_contains_text(card.get_by_test_id("pump-type"), expected_type)
        self.kit.verify_element_contains_text(card.get_by_test_id("pump-status"), expected_status)

    def verify_mobile_controls_visible(self) -> None:
        self.kit.verify_element_visible(self.mobile_filter_toggle)
        self.kit.verify_element_visible(self.mobile_sort_toggle)

    def verify_mobile_layout(self) -> None:
        if not self.kit.is_mobile():
            return
        self.verify_mobile_controls_visible()
        box = self.kit.element_box(self.pump_cards.first)
        viewport = self.kit.viewport_size()
        if box and viewport and box["width"] > viewport["width"] * MOBILE_CARD_MAX_WIDTH_RATIO:
            raise LayoutError(
                f"Pump card is too wide for mobile layout ({box['width']}px "
                f"in a {viewport['width']}px viewport)"
            )

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    def get_pump_count(self) -> int:
        return self.pump_cards.count()

    def get_total_items_count(self) -> str:
        return self.kit.get_text(self.total_items_count)

    def get_search_input_value(self) -> str:
        return self.search_input.input_value()

    def get_current_filter_value(self) -> str:
        return self.filter_dropdown.input_value()

    def get_current_sort_value(self) -> str:
        return self.sort_dropdown.input_value()

    def get_all_pump_names(self) -> list[str]:
        names = []
        for element in self.pump_names.all():
            name = element.text_content()
            if name:
                names.append(name)
        return names
