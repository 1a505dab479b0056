"""Path convention conversions between Windows, POSIX, Git Bash and WSL."""

import re

from textamender.transforms.base import Category, amendment

# Each line is treated as one path.
_WINDOWS_DRIVE_RE = re.compile(r"^([A-Za-z]):", re.MULTILINE)
_WSL_MOUNT_RE = re.compile(r"^/mnt/([A-Za-z])(?=/|$)", re.MULTILINE)
_GIT_BASH_DRIVE_RE = re.compile(r"^/([A-Za-z])(?=/|$)", re.MULTILINE)

THIS_PC_FOLDERS = (
    "3D Objects",
    "Desktop",
    "Documents",
    "Downloads",
    "Music",
    "Pictures",
    "Videos",
)


def _upper_drive(match: re.Match) -> str:
    return match.group(1).upper() + ":"


@amendment(
    name="Unix Path",
    key="unix-path",
    category=Category.PATHS,
    description='text.replace("\\\\", "/")',
    input_label="Windows path",
    input_example="C:\\Users\\a",
)
def to_unix_path(text: str) -> str:
    return text.replace("\\", "/")


@amendment(
    name="Windows Path",
    key="windows-path",
    category=Category.PATHS,
    description='text.replace("/", "\\\\"); also rewrites /c and /mnt/c drive prefixes for Git Bash and WSL users',
    input_label="POSIX path",
    input_example="/mnt/c/Users/a",
)
def to_windows_path(text: str) -> str:
    text = _WSL_MOUNT_RE.sub(_upper_drive, text)
    text = _GIT_BASH_DRIVE_RE.sub(_upper_drive, text)
    return text.replace("/", "\\")


@amendment(
    name="To Git Bash Path",
    key="git-bash-2",
    category=Category.PATHS,
    description="Converts a Windows file path to a Git Bash file path",
    input_label="Windows path",
)
def to_git_bash_path(text: str) -> str:
    text = text.replace("\\", "/")
    return _WINDOWS_DRIVE_RE.sub(lambda m: "/" + m.group(1).lower(), text)


@amendment(
    name="To WSL Path",
    key="wsl-path-2",
    category=Category.PATHS,
    description="Converts a Windows file path to a WSL mount path",
    input_label="Windows path",
)
def to_wsl_path(text: str) -> str:
    text = text.replace("\\", "/")
    return _WINDOWS_DRIVE_RE.sub(lambda m: "/mnt/" + m.group(1).lower(), text)


@amendment(
    name="WSL Path to Windows",
    key="wsl-to-windows",
    category=Category.PATHS,
    description="Converts a WSL mount path such as /mnt/c/Users to a Windows path",
    input_label="WSL path",
)
def wsl_to_windows_path(text: str) -> str:
    return _WSL_MOUNT_RE.sub(_upper_drive, text).replace("/", "\\")


@amendment(
    name="This PC Folders to Full Path",
    key="this-pc-full-path",
    category=Category.PATHS,
    description="Prepends the full Windows path to folders in This PC: " + ", ".join(THIS_PC_FOLDERS),
    input_label="Path relative to This PC",
)
def this_pc_folders_to_full_path(text: str) -> str:
    for folder in THIS_PC_FOLDERS:
        if text.startswith(folder):
            return "C:\\Users\\%USERNAME%\\" + text
    return text


TRANSFORMS = (
    to_unix_path,
    to_windows_path,
    to_git_bash_path,
    to_wsl_path,
    wsl_to_windows_path,
    this_pc_folders_to_full_path,
)
