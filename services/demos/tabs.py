from domain.models import Tab

TAB_CONTENT: dict[Tab, tuple[str, str]] = {
    Tab.HOME: ("Home", "This is the home tab. Put your dashboard stuff here."),
    Tab.SETTINGS: ("Settings", "These settings do absolutely nothing. Yet."),
    Tab.STATS: ("Stats", "Stats go here. (Charts, metrics, numbers, etc.)"),
}


def tab_view(tab: Tab) -> tuple[str, str]:
    return TAB_CONTENT[tab]
