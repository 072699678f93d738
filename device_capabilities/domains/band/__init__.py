"""
頻段領域模組

頻段目錄，以及設備軟體版本對頻段的全域與電信業者支援關係。
"""
