"""JPEG metadata 擷取與 JSON sidecar 輸出。"""

__version__ = "0.1.0"
