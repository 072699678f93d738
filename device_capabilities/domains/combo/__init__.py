"""
載波聚合組合領域模組

LTE CA、EN-DC 與 NR CA 組合、其組成頻段，以及設備軟體版本的支援關係。
"""
