#!/usr/bin/env python3
# Manual / integration script; not run by pytest.
"""Log in with a real browser, then status-check a protected page.

Usage:
    python scripts/check_with_selenium.py LOGIN_URL PROTECTED_URL [COOKIE=DOMAIN]

The browser opens on LOGIN_URL; log in by hand, then press Enter. The
protected URL is checked twice: once with the browser's cookies and once
anonymously.
"""

import logging
import sys

from selenium import webdriver

from url_status_checker import StatusChecker, WebDriverCookieSource


def main() -> int:
    if len(sys.argv) < 3:
        print(__doc__)
        return 1

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    login_url, protected_url = sys.argv[1], sys.argv[2]

    driver = webdriver.Chrome()
    try:
        driver.get(login_url)
        input("Log in in the browser window, then press Enter...")

        checker = StatusChecker(WebDriverCookieSource(driver))
        checker.set_target_uri(protected_url)
        if len(sys.argv) > 3:
            name, _, domain = sys.argv[3].partition("=")
            checker.set_cookie_domain_override(name, domain)

        print("With browser cookies:", checker.check_status())

        checker.set_mimic_cookies(False)
        print("Anonymous:           ", checker.check_status())
        return 0
    finally:
        driver.quit()


if __name__ == "__main__":
    raise SystemExit(main())
