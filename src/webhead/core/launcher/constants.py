from typing import Any, Dict

# Directory below the cache (or snap) base holding all session trees
WEBHEAD_DIR_NAME = "WebHead"
DESCRIPTOR_FILE_NAME = "WebHead.txt"
LOG_FILE_NAME = "WebHead.log"

DEFAULT_XDG_DATA_DIRS = "/usr/local/share:/usr/share"

CHROMIUM_ARGUMENTS = (
    "--incognito",
    "--no-first-run",
    "--no-default-browser-check",
    "--disable-extensions",
    "--disable-sync",
)

FIREFOX_PREFERENCES: Dict[str, Any] = {
    # default browser and first run pages
    "browser.shell.checkDefaultBrowser": False,
    "browser.startup.homepage_override.mstone": "ignore",
    "browser.aboutwelcome.enabled": False,
    "startup.homepage_welcome_url": "",
    "startup.homepage_welcome_url.additional": "",
    "trailhead.firstrun.didSeeAboutWelcome": True,
    # telemetry
    "datareporting.policy.dataSubmissionPolicyBypassNotification": True,
    "datareporting.policy.firstRunURL": "",
    "toolkit.telemetry.reportingpolicy.firstRun": False,
    "browser.newtabpage.activity-stream.feeds.telemetry": False,
    # no disk cache for throw-away profiles
    "browser.cache.disk.enable": False,
    "browser.cache.disk.capacity": 0,
    "browser.tabs.warnOnClose": False,
    "browser.toolbars.bookmarks.visibility": "never",
    # load chrome/userChrome.css
    "toolkit.legacyUserProfileCustomizations.stylesheets": True,
}

FIREFOX_USER_CHROME_CSS = """\
/* Generated by webhead */
@namespace url("http://www.mozilla.org/keymaster/gatekeeper/there.is.only.xul");

/* extension and pocket buttons */
#unified-extensions-button, #pocket-button, #save-to-pocket-button, #fxa-toolbar-menu-button {
  display: none !important;
}

/* telemetry and data reporting notifications */
notification[value="data-reporting"], notification-message[value="data-reporting"],
notification[value="telemetry-notification"], notification-message[value="telemetry-notification"] {
  display: none !important;
}

/* tab bar while only one tab is open */
#tabbrowser-tabs .tabbrowser-tab:only-of-type,
#tabbrowser-tabs .tabbrowser-tab:only-of-type + #tabbrowser-arrowscrollbox-periphery {
  display: none !important;
}
#TabsToolbar:has(.tabbrowser-tab:only-of-type) {
  visibility: collapse !important;
}

/* bookmarks bar */
#PersonalToolbar {
  visibility: collapse !important;
}
"""
