"""等待时间配置（单位：毫秒）"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

DEFAULT_TIMEOUT = int(os.getenv("DEFAULT_TIMEOUT", "30000"))  # expect 断言默认超时
ACTION_TIMEOUT = int(os.getenv("ACTION_TIMEOUT", "10000"))  # 单个动作超时
NAVIGATION_TIMEOUT = int(os.getenv("NAVIGATION_TIMEOUT", "30000"))  # 页面跳转超时

CLICK_TIMEOUT = 5000  # 普通按钮可见+点击
PAYMENT_CLICK_TIMEOUT = 8000  # 支付相关按钮出现较慢
GUEST_CHECKOUT_PROBE_TIMEOUT = 3000  # 游客结算弹窗探测，超时返回 False
DEPENDENT_DROPDOWN_TIMEOUT = 5000  # 选择国家后等待州/省下拉框刷新
PICKUP_TOGGLE_TIMEOUT = 1500  # 勾选到店自提后等待勾选状态生效

ADD_TO_CART_VISIBLE_TIMEOUT = 3000  # 列表页 Add to cart 按钮可见
ADD_TO_CART_SETTLE = 2000  # 加购成功后等待购物车/提示条刷新
ADD_TO_CART_RETRY_DELAY = 1500  # 加购失败后重试间隔
ADD_TO_CART_MAX_FAILURES = int(os.getenv("ADD_TO_CART_MAX_FAILURES", "10"))  # 加购失败次数上限
