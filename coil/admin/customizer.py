"""
Customizer messaging

Five visitor-facing messages can be overridden from the customizer. Each has
a compiled-in default which is also shown as the control's placeholder.

The theme mod store cannot tell a message that was cleared from one that
was never saved: both read back empty. Either case falls back to the
default, so a message cannot be set to an empty string.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from coil.constants.capabilities import Capability
from coil.exceptions import AuthorizationError, CustomizerSettingNotFoundError
from coil.hooks.names import FILTER_SETTINGS_CAPABILITY
from coil.ports import ThemeMods
from coil.utils.sanitize import filter_nohtml

if TYPE_CHECKING:
    from coil.admin.context import AdminContext

logger = logging.getLogger(__name__)

PANEL_ID = "coil_customizer_settings_panel"
MESSAGING_SECTION_ID = "coil_customizer_section_messaging"

MESSAGE_DEFAULTS: dict[str, str] = {
    "coil_unsupported_message": (
        "Not using supported browser and extension, this is how to access / get COIL"
    ),
    "coil_unable_to_verify_message": (
        "You need a valid Coil account in order to see content, here's how.."
    ),
    "coil_voluntary_donation_message": (
        "This site is monetized using Coil.  We ask for your help to pay for our time "
        "in creating this content for you.  Here's how..."
    ),
    "coil_verifying_status_message": "Verifying Web Monetization status. Please wait...",
    "coil_partial_gating_message": (
        "This content is for Coil subscribers only. To access, subscribe to Coil "
        "and install the browser extension."
    ),
}

# (message id, control label, control description)
MESSAGE_CONTROLS: list[tuple[str, str, str]] = [
    (
        "coil_unsupported_message",
        "Incorrect browser setup message",
        "This message is shown when content is set to be subscriber-only, and visitor either isn't "
        "using a supported browser, or doesn't have the browser extension installed correctly.",
    ),
    (
        "coil_unable_to_verify_message",
        "Invalid Web Monetization message",
        "This message is shown when content is set to be subscriber-only, browser setup is correct, "
        "but Web Monetization doesn't start.  It might be due to several reasons, including not "
        "having an active Coil account.",
    ),
    (
        "coil_voluntary_donation_message",
        "Voluntary donation message",
        'This message is shown when content is set to "Monetized and Public" and visitor does not '
        "have Web Monetization in place and active in their browser.",
    ),
    (
        "coil_verifying_status_message",
        "Pending message",
        "This message is shown for a short time time only while check is made on browser setup and "
        "that an active Web Monetization account is in place.",
    ),
    (
        "coil_partial_gating_message",
        "Partial content gating message",
        "This message is shown in footer bar on pages where only some of the content blocks have "
        "been set as Subscriber-Only.",
    ),
]


def get_customizer_messaging_text(message_id: str, theme_mods: ThemeMods, get_default: bool = False) -> str:
    """
    Return the message saved in the customizer, or its default.

    Args:
        message_id:  Customizer setting id of the message.
        theme_mods:  Store holding customizer values.
        get_default: Return the default even when an override is saved.

    Returns:
        The saved text; the default when none is saved or it is empty;
        "" for an unknown message id without a saved value.
    """
    customizer_setting = theme_mods.get_theme_mod(message_id)

    if get_default or not customizer_setting:
        customizer_setting = MESSAGE_DEFAULTS.get(message_id, "")

    return customizer_setting


# ── Customizer framework ──────────────────────────────────────────────────────


@dataclass
class CustomizerPanel:
    id: str
    title: str
    capability: str = Capability.MANAGE_OPTIONS.value


@dataclass
class CustomizerSection:
    id: str
    title: str
    panel: str


@dataclass
class CustomizerSetting:
    id: str
    capability: str = Capability.MANAGE_OPTIONS.value
    sanitize_callback: Callable[[Any], Any] | None = None


@dataclass
class CustomizerControl:
    id: str
    type: str
    label: str
    section: str
    description: str = ""
    input_attrs: dict[str, str] = field(default_factory=dict)


class CustomizeManager:
    """Panels, sections, settings and controls registered for the customizer."""

    def __init__(self) -> None:
        self.panels: dict[str, CustomizerPanel] = {}
        self.sections: dict[str, CustomizerSection] = {}
        self.settings: dict[str, CustomizerSetting] = {}
        self.controls: dict[str, CustomizerControl] = {}

    def add_panel(self, panel_id: str, **args: Any) -> CustomizerPanel:
        panel = CustomizerPanel(id=panel_id, **args)
        self.panels[panel_id] = panel
        return panel

    def add_section(self, section_id: str, **args: Any) -> CustomizerSection:
        section = CustomizerSection(id=section_id, **args)
        self.sections[section_id] = section
        return section

    def add_setting(self, setting_id: str, **args: Any) -> CustomizerSetting:
        setting = CustomizerSetting(id=setting_id, **args)
        self.settings[setting_id] = setting
        return setting

    def add_control(self, control_id: str, **args: Any) -> CustomizerControl:
        control = CustomizerControl(id=control_id, **args)
        self.controls[control_id] = control
        return control

    def get_setting(self, setting_id: str) -> CustomizerSetting | None:
        return self.settings.get(setting_id)

    def as_dict(self) -> dict[str, Any]:
        return {
            "panels": [vars(panel) for panel in self.panels.values()],
            "sections": [vars(section) for section in self.sections.values()],
            "settings": [
                {
                    "id": setting.id,
                    "capability": setting.capability,
                    "sanitize_callback": getattr(setting.sanitize_callback, "__name__", None),
                }
                for setting in self.settings.values()
            ],
            "controls": [vars(control) for control in self.controls.values()],
        }


def coil_add_customizer_options(wp_customize: CustomizeManager, ctx: AdminContext) -> None:
    """Add the Coil panel and messaging section to the customizer."""
    capability = ctx.hooks.apply_filters(FILTER_SETTINGS_CAPABILITY, Capability.MANAGE_OPTIONS.value)

    wp_customize.add_panel(PANEL_ID, title="Coil Settings", capability=capability)

    wp_customize.add_section(MESSAGING_SECTION_ID, title="Messaging", panel=PANEL_ID)

    for message_id, label, description in MESSAGE_CONTROLS:
        wp_customize.add_setting(
            message_id,
            capability=capability,
            sanitize_callback=filter_nohtml,
        )

        wp_customize.add_control(
            message_id,
            type="textarea",
            label=label,
            section=MESSAGING_SECTION_ID,
            description=description,
            input_attrs={
                "placeholder": get_customizer_messaging_text(message_id, ctx.theme_mods, True),
            },
        )


def save_customizer_setting(wp_customize: CustomizeManager, setting_id: str, value: Any, ctx: AdminContext) -> Any:
    """
    Sanitize and store a customizer value.

    Raises:
        CustomizerSettingNotFoundError: the setting was never registered.
        AuthorizationError: the actor lacks the setting's capability.
    """
    setting = wp_customize.get_setting(setting_id)
    if setting is None:
        raise CustomizerSettingNotFoundError(setting_id)

    try:
        capability = Capability(setting.capability)
    except ValueError:
        raise AuthorizationError(required_permission=setting.capability) from None

    if not ctx.authorizer.can(ctx.actor, capability):
        raise AuthorizationError(required_permission=setting.capability)

    if setting.sanitize_callback is not None:
        value = setting.sanitize_callback(value)

    ctx.theme_mods.set_theme_mod(setting_id, value)
    logger.info(f"Customizer setting {setting_id} saved by actor {ctx.actor.id}")
    return value
