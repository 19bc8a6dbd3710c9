class CheckoutError(Exception):
    """结算流程相关异常基类"""


class InteractionTimeout(CheckoutError):
    """控件在限定时间内未出现/不可操作，message 中带上步骤描述"""

    def __init__(self, step: str, cause: Exception | None = None):
        self.step = step
        self.cause = cause
        super().__init__(step)


class ExtractionMiss(CheckoutError):
    """文本中找不到需要的值（仅在后续流程必须使用该值时抛出）"""

    def __init__(self, what: str, text: str | None = None):
        self.what = what
        self.text = text
        snippet = (text or "").strip()[:80]
        super().__init__(f"Could not extract {what} from text: {snippet!r}")


class CheckoutAborted(CheckoutError):
    def __init__(self, step: str, cause: Exception):
        self.step = step
        self.cause = cause
        super().__init__(f"Checkout aborted at step '{step}': {cause}")


class EnvironmentMisconfiguration(CheckoutError):
    """缺少必要的环境配置，在打开浏览器前失败"""
