"""
Cocoa integration.  The modules in this package require PyObjC.
"""
