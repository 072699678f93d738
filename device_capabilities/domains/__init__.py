"""
Domain Layer

包含應用程序的核心領域模型和業務邏輯，按功能領域分為多個子模塊：

- device: 設備目錄（廠商、型號、上市日期）
- software: 設備的軟體版本
- provider: 電信業者
- band / combo / feature: 頻段、載波聚合組合與網路功能的支援關係
- common: 共用的基礎模型與能力查詢結果
"""
