from dataclasses import dataclass


@dataclass(frozen=True)
class LoginLocators:
    username_input: str = "[data-test='username']"  # 用户名
    password_input: str = "[data-test='password']"  # 用户密码
    login_button: str = "[data-test='login-button']"  # 登录按钮
    error_msg: str = "[data-test='error']"  # 登录错误提示信息
    error_close_button: str = "[data-test='error-button']"  # 错误提示关闭按钮
    shopping_cart_visible: str = "[data-test='shopping-cart-link']"  # 登录成功页面购物车icon


@dataclass(frozen=True)
class InventoryLocators:
    inventory_container: str = "[data-test='inventory-container']"  # 商品列表容器
    page_title: str = "[data-test='title']"  # 页面标题 Products
    item_product: str = "[data-test='inventory-item']"  # 商品列表
    item_product_name: str = "[data-test='inventory-item-name']"  # 单商品名称
    item_product_price: str = "[data-test='inventory-item-price']"  # 单商品价格
    item_product_desc: str = "[data-test='inventory-item-desc']"  # 单商品描述
    item_product_img: str = ".inventory_item_img img"  # 单商品图片
    product_sort_type: str = "[data-test='product-sort-container']"  # 商品排序方式

    @staticmethod
    def product_img(product_id: str) -> str:
        return f"[data-test='item-{product_id}-img-link'] img"

    @staticmethod
    def product_title(product_id: str) -> str:
        return f"[data-test='item-{product_id}-title-link']"

    @staticmethod
    def add_to_cart(slug: str) -> str:
        return f"[data-test='add-to-cart-{slug}']"

    @staticmethod
    def remove(slug: str) -> str:
        return f"[data-test='remove-{slug}']"


@dataclass(frozen=True)
class CartLocators:
    add_product_button: str = "[data-test^='add-to-cart']"  # 商品添加按钮
    remove_product_button: str = "[data-test^='remove']"  # 验证已添加商品按钮文字变为“Remove”
    shopping_cart_visible_count: str = "[data-test='shopping-cart-badge']"  # 购物车显示商品数量
    cart_list: str = "[data-test='cart-list']"  # 购物车商品列表
    cart_item: str = "[data-test='inventory-item']"  # 购物车单商品
    item_quantity: str = "[data-test='item-quantity']"  # 单商品数量
    continue_button: str = "[data-test='continue-shopping']"  # 继续购物按钮
    checkout_button: str = "[data-test='checkout']"  # 结算按钮


@dataclass(frozen=True)
class CheckoutLocators:
    # 收货人信息
    firstName_input: str = "[data-test='firstName']"  # firstName输入框
    lastName_input: str = "[data-test='lastName']"  # lastName输入框
    postalCode_input: str = "[data-test='postalCode']"  # postalCode输入框
    container_error_msg: str = "[data-test='error']"  # 未填写收货人信息提交错误提示msg Error: First Name is required
    step_one_cancel_button: str = "[data-test='cancel']"  # 取消按钮
    continue_button: str = "[data-test='continue']"  # 继续按钮

    # --------checkout_step_two.html---------
    # 商品信息
    item_list: str = "[data-test='inventory-item']"  # 订单确认页面商品列表
    item_product_name: str = "[data-test='inventory-item-name']"  # 单商品名称
    item_product_price: str = "[data-test='inventory-item-price']"  # 单商品价格
    item_product_desc: str = "[data-test='inventory-item-desc']"  # 单商品描述
    item_quantity: str = "[data-test='item-quantity']"  # 单商品数量
    # 订单价格
    payment_information: str = "[data-test='payment-info-value']"  # 支付信息value
    shipping_information: str = "[data-test='shipping-info-value']"  # 运费信息value
    products_price: str = "[data-test='subtotal-label']"  # 商品价格
    tax_price: str = "[data-test='tax-label']"  # 税费
    order_price: str = "[data-test='total-label']"  # 订单价格
    # 操作步骤
    step_two_cancel_button: str = "[data-test='cancel']"  # 取消按钮
    finish_button: str = "[data-test='finish']"  # 完成按钮
    finish_page_message: str = "[data-test='complete-header']"  # 完成页面提示信息
    back_home_button: str = "[data-test='back-to-products']"  # 返回商品列表


LOGIN_LOCATORS = LoginLocators()
INVENTORY_LOCATORS = InventoryLocators()
CART_LOCATORS = CartLocators()
CHECKOUT_LOCATORS = CheckoutLocators()
