"""Command line interface for mirror-deploy"""
