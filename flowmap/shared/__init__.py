"""共通モジュール"""
