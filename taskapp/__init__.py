"""Namespaced task-tracking service"""
