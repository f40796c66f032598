"""login功能测试用例：测试数据、登录错误提示信息
测试正常登录流程
用户名错误
密码错误
用户名和密码都为空
密码为空
用户名不存在
用户被锁定
"""

PASSWORD = "secret_sauce"

USERS = {
    "standard": {"username": "standard_user", "password": PASSWORD},
    "locked": {"username": "locked_out_user", "password": PASSWORD},
    "problem": {"username": "problem_user", "password": PASSWORD},
    "performance": {"username": "performance_glitch_user", "password": PASSWORD},
    "error": {"username": "error_user", "password": PASSWORD},
    "visual": {"username": "visual_user", "password": PASSWORD},
}

NOT_MATCH_ERROR_MSG = "Epic sadface: Username and password do not match any user in this service"

LOGIN_USERS = {
    "success_login": USERS["standard"],
    "wrong_username": {"username": "HAHAHA", "password": PASSWORD, "error_msg": NOT_MATCH_ERROR_MSG},
    "wrong_password": {"username": "standard_user", "password": "12345", "error_msg": NOT_MATCH_ERROR_MSG},
    "empty_username_password": {"username": "", "password": "", "error_msg": "Epic sadface: Username is required"},
    "empty_password": {"username": "standard_user", "password": "", "error_msg": "Epic sadface: Password is required"},
    "inexistence_username": {"username": "test_user", "password": PASSWORD, "error_msg": NOT_MATCH_ERROR_MSG},
    "locked_out": {**USERS["locked"], "error_msg": "Epic sadface: Sorry, this user has been locked out."},
}

LOGIN_SUCCESS_URL = "/inventory.html"
LOGIN_SUCCESS_TITLE = "Products"
