"""
Storage 子系统：页面模型、偏移换算与页表管理。

模块清单：
- page: 固定容量页面
- translator: 移位 + 掩码的偏移换算
- page_table: 页表（页句柄数组）、活动页游标与扩容
"""
