import json
import os
from pathlib import Path

from data.checkout_data import USER_DATA_FILE, USER_DATA_KEY
from data.models import GuestUserProfile

ROOT_DIR = Path(__file__).resolve().parent.parent


def load_guest_profile(path: str | Path | None = None, key: str = USER_DATA_KEY) -> GuestUserProfile:
    """
    读取游客资料 json（默认 data/users.json，可用 USER_DATA_FILE 环境变量覆盖）
    """
    data_path = Path(path or os.getenv("USER_DATA_FILE") or ROOT_DIR / USER_DATA_FILE)
    if not data_path.is_absolute():
        data_path = ROOT_DIR / data_path
    raw = json.loads(data_path.read_text(encoding="utf-8"))
    if key not in raw:
        raise KeyError(f"{data_path} 中不存在用户数据 {key!r}")
    return GuestUserProfile.from_dict(raw[key])
