"""Segmentation collaborators for pavement scans."""
