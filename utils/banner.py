import os
import subprocess
from datetime import datetime

# Global flag to ensure banner is only shown once
_banner_shown = False


def get_git_info():
    """Get git commit hash and commit date"""
    try:
        git_hash = subprocess.check_output(['git', 'rev-parse', 'HEAD'],
                                           stderr=subprocess.DEVNULL).decode().strip()[:8]
        git_date = subprocess.check_output(['git', 'show', '-s', '--format=%ci', 'HEAD'],
                                           stderr=subprocess.DEVNULL).decode().strip()
        return git_hash, git_date
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown", "unknown"


def get_build_info():
    """Get build information from environment (set during Docker build)"""
    build_time = os.environ.get('BUILD_TIME')
    git_hash_env = os.environ.get('GIT_HASH')

    if build_time is None:
        build_time = datetime.utcnow().strftime('%Y-%m-%d %H:%M:%S UTC')

    return build_time, git_hash_env


def print_startup_banner(database_uri=None):
    """Print startup banner with build and database info"""
    global _banner_shown

    if _banner_shown:
        return
    _banner_shown = True

    git_hash, git_date = get_git_info()
    build_time, git_hash_env = get_build_info()
    display_hash = git_hash_env[:8] if git_hash_env else git_hash

    print("\033[94m" + "=" * 70 + "\033[0m")
    print("\033[96m  Party Platform :: registration & invites\033[0m")
    print("\033[94m" + "=" * 70 + "\033[0m")
    print(f"   Build Time: {build_time}")
    print(f"   Git Hash:   {display_hash}")
    if git_date != "unknown":
        print(f"   Git Date:   {git_date}")
    if database_uri:
        # Hide credentials in postgres URLs
        print(f"   Database:   {database_uri.split('@')[-1]}")
    print("\033[94m" + "=" * 70 + "\033[0m")
    print()
