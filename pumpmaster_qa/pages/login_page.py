"""
Login screen model.
"""
from .interaction_kit import InteractionKit, LayoutError

MOBILE_MAX_FORM_WIDTH = 400
TABLET_FORM_WIDTH_RANGE = (400, 600)
DESKTOP_MIN_FORM_WIDTH = 400


class LoginPage:
    """Username/password login form, with mobile menu and touch-id login."""

    PATH = "/login"

    def __init__(self, kit: InteractionKit):
        self.kit = kit
        self.username_input = kit.by_test_id("username-input")
        self.password_input = kit.by_test_id("password-input")
        self.login_button = kit.by_test_id("login-button")
        self.error_message = kit.by_test_id("error-message")
        self.login_form = kit.by_test_id("login-form")
        self.page_title = kit.page.locator("h1")
        self.mobile_menu_toggle = kit.by_test_id("mobile-menu-toggle")
        self.touch_id_button = kit.by_test_id("touch-id-button")

    # Actions

    def navigate_to_login(self) -> None:
        self.kit.navigate(self.PATH)
        self.kit.verify_element_visible(self.login_form)

    def enter_username(self, username: str) -> None:
        self.kit.fill_input(self.username_input, username)

    def enter_password(self, password: str) -> None:
        self.kit.fill_input(self.password_input, password)

    def click_login_button(self) -> None:
        self.kit.click_element(self.login_button)

    def login(self, username: str, password: str) -> None:
        self.enter_username(username)
        self.enter_password(password)
        self.click_login_button()

    def login_with_touch_id(self) -> None:
        """Mobile only; does nothing on larger viewports."""
        if self.kit.is_mobile():
            self.kit.click_element(self.touch_id_button)

    def toggle_mobile_menu(self) -> None:
        if self.kit.is_mobile():
            self.kit.click_element(self.mobile_menu_toggle)

    # Verification

    def verify_login_page_loaded(self) -> None:
        for locator in (self.login_form, self.username_input, self.password_input, self.login_button):
            self.kit.verify_element_visible(locator)

    def verify_error_message(self, expected_message: str) -> None:
        self.kit.verify_element_visible(self.error_message)
        self.kit.verify_element_contains_text(self.error_message, expected_message)

    def verify_login_button_enabled(self) -> None:
        self.kit.verify_element_enabled(self.login_button)

    def verify_login_button_disabled(self) -> None:
        self.kit.verify_element_disabled(self.login_button)

    def verify_username_field_empty(self) -> None:
        assert self.get_username_value() == "", "Username field is not empty"

    def verify_password_field_empty(self) -> None:
        assert self.get_password_value() == "", "Password field is not empty"

    # Getters

    def get_error_message_text(self) -> str:
        return self.kit.get_text(self.error_message)

    def get_username_value(self) -> str:
        return self.username_input.input_value()

    def get_password_value(self) -> str:
        return self.password_input.input_value()

    # Responsive layout

    def verify_mobile_layout(self) -> None:
        if not self.kit.is_mobile():
            return
        self.kit.verify_element_visible(self.mobile_menu_toggle)
        box = self.kit.element_box(self.login_form)
        if box and box["width"] > MOBILE_MAX_FORM_WIDTH:
            raise LayoutError(f"Login form is too wide for mobile layout ({box['width']}px)")

    def verify_tablet_layout(self) -> None:
        if not self.kit.is_tablet():
            return
        box = self.kit.element_box(self.login_form)
        low, high = TABLET_FORM_WIDTH_RANGE
        if box and not low <= box["width"] <= high:
            raise LayoutError(
                f"Login form width {box['width']}px is not appropriate for tablet layout"
            )

    def verify_desktop_layout(self) -> None:
        if not self.kit.is_desktop():
            return
        box = self.kit.element_box(self.login_form)
        if box and box["width"] < DESKTOP_MIN_FORM_WIDTH:
            raise LayoutError(f"Login form is too narrow for desktop layout ({box['width']}px)")
