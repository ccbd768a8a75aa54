"""Tasky - a small conversational task tracker."""
