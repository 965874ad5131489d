import pathlib

OS_RELEASE = pathlib.Path("/etc/os-release")


def read_os_release(path=OS_RELEASE):
    data = {}
    if not path.exists():
        return data
    for line in path.read_text().splitlines():
        if "=" not in line or line.startswith("#"):
            continue
        k, v = line.split("=", 1)
        data[k] = v.strip().strip('"')
    return data


def get_distro(path=OS_RELEASE):
    data = read_os_release(path)
    if not data:
        return "generic"
    id_ = data.get("ID", "").lower()
    like = data.get("ID_LIKE", "").lower()
    if id_ in ("arch", "manjaro", "endeavouros") or "arch" in like:
        return "arch"
    return id_ or "generic"


def is_arch_based(path=OS_RELEASE) -> bool:
    return get_distro(path) == "arch"
