from decimal import Decimal

from data.models import OrderConfirmation, TOLERANCE


class CheckOutAssert:

    @staticmethod
    def title_contains(actual_title: str, expect_text: str):
        assert expect_text in actual_title, f"页面标题{actual_title!r}中不包含{expect_text!r}"

    @staticmethod
    def in_store_pickup_selected(selected: bool):
        assert selected, "到店自提（In-Store Pickup）未勾选"

    @staticmethod
    def order_number_present(confirmation: OrderConfirmation):
        """订单号非空且为数字"""
        assert confirmation.succeeded, "下单成功页未找到订单号"
        assert confirmation.order_number.isdigit(), f"订单号格式错误：{confirmation.order_number}"

    @staticmethod
    def order_total_covers_subtotal(actual: Decimal, cart_subtotal: Decimal):
        """下单金额 >= 购物车商品小计（货到付款会加手续费）"""
        assert actual > 0, f"订单金额必须大于0：{actual}"
        assert actual + TOLERANCE >= cart_subtotal, f"订单金额{actual} < 购物车商品小计{cart_subtotal}"

    @staticmethod
    def order_contains_products(actual_names: list[str], expected_names: list[str]):
        """订单详情中的商品名包含所有预期商品（商品名后可能带属性说明）"""
        missing = [name for name in expected_names if not any(name in actual for actual in actual_names)]
        assert not missing, f"订单中缺少商品：{missing}，实际商品：{actual_names}"

    @staticmethod
    def order_number_matches(actual: str | None, expect_number: str):
        assert actual == expect_number, f"订单详情页订单号{actual} != 下单成功页订单号{expect_number}"
