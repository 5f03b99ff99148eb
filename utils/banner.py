import os
import subprocess
from utils.helpers import utcnow

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

def print_startup_banner():
    """Print build info once per process"""
    global _banner_shown

    if _banner_shown:
        return
    _banner_shown = True

    git_hash, git_date = get_git_info()
    # Set during container builds, where there is no .git directory
    build_time = os.environ.get('BUILD_TIME') or utcnow().strftime('%Y-%m-%d %H:%M:%S UTC')
    display_hash = (os.environ.get('GIT_HASH') or git_hash)[:8]

    banner = r"""
 _                  _ _ _     _
| | ___ __ ___  __| (_) |__ | | ___
| |/ / '__/ _ \/ _` | | '_ \| |/ _ \
|   <| | |  __/ (_| | | |_) | |  __/
|_|\_\_|  \___|\__,_|_|_.__/|_|\___|
    """

    print("\033[96m" + banner + "\033[0m")
    print("\033[94m" + "="*70 + "\033[0m")
    print("\033[92mBuild Info:\033[0m")
    print(f"   Build Time: {build_time}")
    print(f"   Git Hash:   {display_hash}")
    if git_date != "unknown":
        print(f"   Git Date:   {git_date}")
    print("\033[94m" + "="*70 + "\033[0m")
    print("\033[93mStarting Kredible...\033[0m")
    print()
