import platform
import pathlib

OS_RELEASE = pathlib.Path("/etc/os-release")
ARCH_IDS = ("arch", "manjaro", "endeavouros", "cachyos", "garuda", "artix")


def read_os_release(path=OS_RELEASE) -> dict:
    data = {}
    if not path.exists():
        return data
    for line in path.read_text().splitlines():
        if "=" not in line or line.startswith("#"):
            continue
        k, v = line.split("=", 1)
        data[k.strip()] = v.strip().strip('"')
    return data


def is_arch_based(path=OS_RELEASE) -> bool:
    """
    True on Arch Linux and its derivatives (by ID or ID_LIKE).
    """
    if platform.system() != "Linux":
        return False
    data = read_os_release(path)
    if data.get("ID", "").lower() in ARCH_IDS:
        return True
    return "arch" in data.get("ID_LIKE", "").lower().split()
