"""Data models for market snapshots, budget profiles and recommendations"""
