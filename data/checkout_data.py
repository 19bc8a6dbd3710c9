"""place order 功能测试数据
加购多个商品
购物车商品及金额校验
游客结算下单
下单并校验金额
"""

PRODUCTS_TO_ADD = 4  # 至少加购商品数量
PAYMENT_METHOD = "cash_on_delivery"  # 货到付款

HOME_PAGE_TITLE = "Demo Web Shop"
CART_PAGE_TITLE = "Shopping Cart"

USER_DATA_FILE = "data/users.json"
USER_DATA_KEY = "guestUser"

NOTEBOOK_PRODUCT = "14.1-inch Laptop"  # 商品详情页加购用例
NOTEBOOK_QUANTITY = 2
