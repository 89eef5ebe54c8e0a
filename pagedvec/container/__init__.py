"""
Container 子系统：建立在页表之上的分页向量（push/pop/erase/assign/随机访问）。
"""
