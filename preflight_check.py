"""
Pre-flight Check Script
Validates that the client is installed, configured, and authorized.
"""
import sys
from typing import Optional

import requests


def check_python_version():
    """Check Python version is 3.8+"""
    print("🔍 Checking Python version...")
    version = sys.version_info
    if version.major < 3 or (version.major == 3 and version.minor < 8):
        print(f"   ❌ Python 3.8+ required, found {version.major}.{version.minor}")
        return False
    print(f"   ✅ Python {version.major}.{version.minor}.{version.micro}")
    return True


def check_dependencies():
    """Check required packages are installed"""
    print("\n🔍 Checking dependencies...")

    required = {
        'dotenv': 'python-dotenv',
        'requests': 'requests',
    }

    missing = []
    for module, package in required.items():
        try:
            __import__(module)
            print(f"   ✅ {package}")
        except ImportError:
            print(f"   ❌ {package} - NOT INSTALLED")
            missing.append(package)

    if missing:
        print(f"\n   Install missing packages:")
        print(f"   pip install {' '.join(missing)}")
        return False

    return True


def check_config():
    """Check configuration loads and validates"""
    print("\n🔍 Checking configuration...")

    from config import get_config

    try:
        config = get_config()
    except ValueError as e:
        print(f"   ❌ {e}")
        return False

    print(f"   ✅ SPOTIFY_API_BASE_URL = {config.spotify.api_base_url}")
    print(f"   ✅ LOG_LEVEL = {config.log_level}")

    token = config.spotify.access_token
    if token:
        # Mask the value for security
        masked = token[:8] + '...' if len(token) > 8 else '***'
        print(f"   ✅ SPOTIFY_ACCESS_TOKEN = {masked}")
    else:
        print("   ⚠️  SPOTIFY_ACCESS_TOKEN not set (authorization check will be skipped)")

    return True


def check_authorization(session: Optional[requests.Session] = None):
    """Check the configured token is accepted by the API"""
    print("\n🔍 Checking authorization...")

    from config import get_config
    from clients import SpotifyAPIClient

    config = get_config()
    if not config.spotify.access_token:
        print("   ⚠️  No access token configured - skipped")
        return True

    client = SpotifyAPIClient(config=config.spotify, session=session)

    try:
        response = client.get_authenticated_user()
    except requests.exceptions.RequestException as e:
        print(f"   ❌ Could not reach {client.base_url}: {e}")
        return False

    if 200 <= response.status_code < 300:
        user = response.json()
        print(f"   ✅ Authorized as {user.get('display_name') or user.get('id')}")
        return True

    print(f"   ❌ API returned {response.status_code}")
    if response.status_code == 401:
        print("   Token is invalid or expired - refresh it and retry")
    return False


def main(session: Optional[requests.Session] = None):
    """Run all checks"""
    print("=" * 60)
    print("🚀 PRE-FLIGHT CHECK - Spotify Web API client")
    print("=" * 60)

    checks = [
        ("Python Version", check_python_version),
        ("Dependencies", check_dependencies),
        ("Configuration", check_config),
        ("Authorization", lambda: check_authorization(session)),
    ]

    results = []
    for name, check_func in checks:
        try:
            result = check_func()
            results.append((name, result))
        except Exception as e:
            print(f"\n   ❌ Error checking {name}: {e}")
            results.append((name, False))
        if not results[-1][1] and name in ("Dependencies", "Configuration"):
            # Later checks need a working install and config
            break

    print("\n" + "=" * 60)
    print("📋 SUMMARY")
    print("=" * 60)

    for name, result in results:
        status = "✅" if result else "❌"
        print(f"{status} {name}")

    print("\n" + "=" * 60)

    if all(result for _, result in results) and len(results) == len(checks):
        print("✅ ALL CHECKS PASSED - Ready to use the client!")
        return 0

    print("❌ CHECKS FAILED - Fix issues above before using the client")
    return 1


if __name__ == "__main__":
    sys.exit(main())
