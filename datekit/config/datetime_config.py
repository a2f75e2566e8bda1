#!filepath: datekit/config/datetime_config.py
from pydantic import BaseModel

class DateTimeConfig(BaseModel):
    # False 复现旧输出：毫秒四舍五入到 1000 时显示 ".000"，不进位到秒
    carry_millis: bool = True
