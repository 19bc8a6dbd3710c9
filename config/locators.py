HOME_LOCATORS = {
    "shopping_cart_link": "a.ico-cart",  # 顶部购物车链接 Shopping cart (N)
    "top_menu": ".top-menu",  # 顶部菜单，悬停 Computers 展开子菜单
    "computers_menu_text": "Computers",
    "notebooks_menu_text": "Notebooks",
}

CATEGORY_LOCATORS = {
    "product_item": ".product-item",  # 商品列表
    "product_title_link": "h2.product-title a",  # 商品名称链接
    "product_price": ".price",  # 商品价格
    "catalog_add_to_cart": "input.button-2.product-box-add-to-cart-button",  # 列表页 Add to cart 按钮
    "details_add_to_cart": "input.button-1.add-to-cart-button",  # 详情页 Add to cart 按钮
    "details_qty_input": "input.qty-input",  # 详情页数量输入框
    "success_notification": ".bar-notification.success",  # 加购成功提示条
    "notification_close": ".bar-notification.success .close",
}

CART_LOCATORS = {
    "cart_table": ".cart",
    "cart_rows": ".cart-item-row",  # 购物车商品行
    "qty_input": "input.qty-input",  # 行内数量
    "unit_price": ".product-unit-price",  # 单价
    "product_name": ".product-name",  # 商品名称
    "line_subtotal": ".product-subtotal",  # 行小计
    "terms_of_service": "input[type='checkbox'][id*='terms']",  # 服务条款
    "checkout_button": "button#checkout",  # 结算按钮
    "subtotal": ".cart-total-right:has-text('Sub-Total') + td",
    "shipping": ".cart-total-right:has-text('Shipping') + td",
    "tax": ".cart-total-right:has-text('Tax') + td",
    "total": ".cart-total-right:has-text('Total:') + td",
}

CHECKOUT_LOCATORS = {
    # 游客结算
    "checkout_as_guest": "input[value='Checkout as Guest']",

    # 账单地址
    "first_name": "input#BillingNewAddress_FirstName",
    "last_name": "input#BillingNewAddress_LastName",
    "email": "input#BillingNewAddress_Email",
    "company": "input#BillingNewAddress_Company",
    "country": "select#BillingNewAddress_CountryId",
    "state": "select#BillingNewAddress_StateProvinceId",
    "city": "input#BillingNewAddress_City",
    "address1": "input#BillingNewAddress_Address1",
    "address2": "input#BillingNewAddress_Address2",
    "zip_code": "input#BillingNewAddress_ZipPostalCode",
    "phone_number": "input#BillingNewAddress_PhoneNumber",
    "fax_number": "input#BillingNewAddress_FaxNumber",
    "billing_continue": "input[onclick^='Billing.save()']",

    # 配送方式（到店自提）
    "in_store_pickup": "input#PickUpInStore[type='checkbox']",
    "shipping_continue": "input[type='button'].new-address-next-step-button[onclick*='Shipping.save()']",

    # 支付方式 / 支付信息
    "payment_method_radio": "input[name='paymentmethod'][value='{method}']",
    "payment_method_continue": "input[type='button'].payment-method-next-step-button[onclick*='PaymentMethod.save()']",
    "payment_info_continue": "input[type='button'].payment-info-next-step-button[onclick*='PaymentInfo.save()']",

    # 确认订单
    "confirm_order": "input[type='button'].confirm-order-next-step-button[onclick*='ConfirmOrder.save()']",
}

ORDER_LOCATORS = {
    "order_number_text": ":text('Order number:')",  # 下单成功页订单号
    "order_details_link": "a[href*='/orderdetails']",  # 订单详情链接
    "page_body": "body",
    "order_total_section": ".cart-total",  # 订单金额区域
    "order_total_value": ".value-summary",
    "order_details_products": ".order-details-page .data-table tbody tr",  # 订单详情页商品行
    "order_details_product_name": "td.name",
}

# 支付方式 → radio value
PAYMENT_METHODS = {
    "cash_on_delivery": "Payments.CashOnDelivery",
    "check_money_order": "Payments.CheckMoneyOrder",
}

# 页面脚本：到店自提勾选框的 onclick 由 Shipping.togglePickUpInStore 驱动，原生 click 有时不会触发
PICKUP_TOGGLE_SCRIPT = """() => {
    const box = document.getElementById('PickUpInStore');
    if (!box) { return false; }
    box.checked = true;
    if (window.Shipping && typeof window.Shipping.togglePickUpInStore === 'function') {
        window.Shipping.togglePickUpInStore(box);
    }
    box.dispatchEvent(new Event('change', { bubbles: true }));
    return box.checked;
}"""
