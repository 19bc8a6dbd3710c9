from decimal import Decimal

from data.models import CartLine, TOLERANCE


class CartAssert:

    @staticmethod
    def item_count_at_least(actual: int, expect_min: int):
        """购物车商品数量 >= 预期加购数量"""
        assert actual >= expect_min, f"购物车商品数量不足：{actual} < {expect_min}"

    @staticmethod
    def item_count_not_decreased(before: int, after: int):
        assert after >= before, f"继续加购后购物车商品数量减少：{before} -> {after}"

    @staticmethod
    def lines_consistent(lines: list[CartLine]):
        """每行小计 = 单价 × 数量"""
        assert lines, "购物车商品行为空"
        for line in lines:
            assert line.is_consistent(), \
                f"{line.name} 行小计错误：{line.unit_price} × {line.quantity} != {line.subtotal}"

    @staticmethod
    def subtotal_matches_lines(lines: list[CartLine], subtotal: Decimal):
        expect = sum((line.subtotal for line in lines), Decimal("0"))
        assert abs(expect - subtotal) <= TOLERANCE, f"商品小计{subtotal} != 各行小计之和{expect}"

    @staticmethod
    def contains_products(actual: dict[str, int], expected: dict[str, int]):
        """每个预期商品都在购物车中且数量一致"""
        wrong = {name: (actual.get(name, 0), qty) for name, qty in expected.items() if actual.get(name, 0) != qty}
        assert not wrong, "购物车商品数量不符（实际, 预期）：" + ", ".join(f"{k}={v}" for k, v in wrong.items())
