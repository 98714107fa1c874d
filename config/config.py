"""配置文件"""

# 计算器参数
CALCULATOR_CONFIG = {
    "prompt": "calc> ",
    "quit_commands": ("q", "quit"),
    "allow_partial": True,  # 栈中剩余多个值时返回第一个，False 则报 invalid expression
}

# 日志参数
LOGGING_CONFIG = {
    "level": "WARNING",
    "debug_level": "DEBUG",  # --debug 时使用，输出Token与后缀序列
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    quit_commands = CALCULATOR_CONFIG["quit_commands"]
    assert quit_commands, "至少需要一个退出命令"
    assert all(cmd == cmd.strip().lower() for cmd in quit_commands), "退出命令必须是去空白的小写形式"
    assert isinstance(CALCULATOR_CONFIG["allow_partial"], bool), "allow_partial 必须是布尔值"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    assert LOGGING_CONFIG["debug_level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
