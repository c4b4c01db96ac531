"""Content version history, restore and retention service for CMS posts and pages."""
