"""Headless panel-based viewer model for editing, rendering and exporting scenes."""