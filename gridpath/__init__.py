"""
Grid shortest-path solver (8-directional A*) with a small pygame editor.
"""
