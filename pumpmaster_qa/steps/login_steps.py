"""
Given/When/Then steps for the login screen.
"""
from ..config import Settings, get_settings
from ..factories.api import invalid_login_credentials, login_credentials
from ..helpers.browser import set_mobile_viewport, set_tablet_viewport
from ..pages.interaction_kit import InteractionKit
from ..pages.login_page import LoginPage

PUMPS_URL = "**/pumps"
RESET_PASSWORD_URL = "**/reset-password"

ACCOUNT_LOCKED_MESSAGE = "Account temporarily locked"
LOCKOUT_NOTICE_MESSAGE = "Too many failed attempts"


class LoginSteps:
    def __init__(self, kit: InteractionKit, settings: Settings | None = None):
        self.kit = kit
        self.settings = settings or get_settings()
        self.login_page = LoginPage(kit)

    # -------------------------------------------------------------------------
    # Given
    # -------------------------------------------------------------------------

    def given_i_am_on_the_login_page(self) -> None:
        self.login_page.navigate_to_login()

    def given_i_am_using_a_mobile_device(self) -> None:
        set_mobile_viewport(self.kit.page)

    def given_i_am_using_a_tablet_device(self) -> None:
        set_tablet_viewport(self.kit.page)

    # -------------------------------------------------------------------------
    # When
    # -------------------------------------------------------------------------

    def _enter_valid_credentials(self) -> None:
        creds = login_credentials(self.settings)
        self.login_page.enter_username(creds.username)
        self.login_page.enter_password(creds.password)

    def when_i_enter_valid_username_and_password(self) -> None:
        self._enter_valid_credentials()

    def when_i_enter_invalid_username_and_password(self) -> None:
        creds = invalid_login_credentials()
        self.login_page.enter_username(creds.username)
        self.login_page.enter_password(creds.password)

    def when_i_leave_username_and_password_empty(self) -> None:
        self.login_page.enter_username("")
        self.login_page.enter_password("")

    def when_i_check_the_remember_me_checkbox(self) -> None:
        """No-op: the login form has no remember-me option."""

    def when_i_click_the_login_button(self) -> None:
        self.login_page.click_login_button()

    def when_i_tap_the_login_button(self) -> None:
        self.login_page.click_login_button()

    def when_i_click_the_forgot_password_link(self) -> None:
        """No-op: the login form has no forgot-password link."""

    def when_i_tap_the_touch_id_button(self) -> None:
        self.login_page.login_with_touch_id()

    def when_i_navigate_using_only_keyboard(self) -> None:
        self.kit.press_key("Tab")

    def when_i_tab_through_all_form_elements(self) -> None:
        # username, password, login button
        for _ in range(3):
            self.kit.press_key("Tab")

    def when_i_enter_credentials_using_keyboard(self) -> None:
        self._enter_valid_credentials()

    def when_i_press_enter_to_submit(self) -> None:
        self.kit.press_key("Enter")

    def when_i_enter_invalid_credentials(self, attempts: int) -> None:
        """Submit bad credentials attempts times, waiting for the error between tries."""
        creds = invalid_login_credentials()
        for attempt in range(attempts):
            self.login_page.login(creds.username, creds.password)
            if attempt < attempts - 1:
                self.kit.wait_for_element(self.login_page.error_message)

    # -------------------------------------------------------------------------
    # Then
    # -------------------------------------------------------------------------

    def then_i_should_be_redirected_to_the_pumps_overview_page(self) -> None:
        self.kit.wait_for_url(PUMPS_URL)

    def then_i_should_see_a_welcome_message(self) -> None:
        """No-op: the overview page shows no welcome banner."""

    def then_i_should_see_an_error_message(self, expected_message: str) -> None:
        self.login_page.verify_error_message(expected_message)

    def then_i_should_remain_on_the_login_page(self) -> None:
        self.login_page.verify_login_page_loaded()

    def then_the_login_button_should_be_disabled(self) -> None:
        self.login_page.verify_login_button_disabled()

    def then_i_should_see_validation_messages_for_required_fields(self) -> None:
        self.login_page.verify_username_field_empty()
        self.login_page.verify_password_field_empty()

    def then_my_login_should_be_remembered_for_future_sessions(self) -> None:
        """No-op: sessions are not persisted across browser restarts."""

    def then_i_should_be_redirected_to_the_password_reset_page(self) -> None:
        self.kit.wait_for_url(RESET_PASSWORD_URL)

    def then_i_should_be_authenticated_using_biometric_authentication(self) -> None:
        """No-op: biometric login cannot be observed from the browser."""

    def then_the_mobile_navigation_should_be_visible(self) -> None:
        self.login_page.verify_mobile_layout()

    def then_the_layout_should_be_optimized_for_tablet_viewing(self) -> None:
        self.login_page.verify_tablet_layout()

    def then_i_should_be_able_to_complete_login_without_using_mouse(self) -> None:
        self.kit.wait_for_url(PUMPS_URL)

    def then_my_account_should_be_temporarily_locked(self) -> None:
        self.login_page.verify_error_message(ACCOUNT_LOCKED_MESSAGE)

    def then_i_should_see_a_message_about_account_lockout(self) -> None:
        self.login_page.verify_error_message(LOCKOUT_NOTICE_MESSAGE)
