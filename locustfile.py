"""
Load test for the Wallet Signer API.

Each simulated user generates its own keys once, then mixes signing,
verification, conversion and generation requests.

Run: locust -f locustfile.py --host http://localhost:3000
"""

import random

from locust import HttpUser, between, task

MESSAGES = ["hello", "Sign in to example.com", "nonce: 1234567890", "gm ✓"]


class WalletSignerUser(HttpUser):
    wait_time = between(1, 2)

    def on_start(self):
        eth = self.client.get("/generate-eth", name="/generate-eth").json()["data"]
        sui = self.client.get("/generate-sui", name="/generate-sui").json()["data"]
        self.eth_key = eth["privateKey"]
        self.sui_key = sui["privateKey"]

    @task(4)
    def sign_and_verify(self):
        message = random.choice(MESSAGES)
        r = self.client.get("/sign", params={"key": self.eth_key, "message": message}, name="/sign")
        signature = r.json()["data"]["signature"]
        self.client.get("/verify", params={"signature": signature, "message": message}, name="/verify")

    @task(2)
    def sui_sign_and_verify(self):
        message = random.choice(MESSAGES)
        r = self.client.get("/sui-sign", params={"privateKey": self.sui_key, "message": message}, name="/sui-sign")
        signature = r.json()["data"]["signature"]
        self.client.get("/sui-verify", params={"signature": signature, "message": message}, name="/sui-verify")

    @task(2)
    def key_conversion(self):
        self.client.get("/eth-key-to-wallet", params={"privateKey": self.eth_key}, name="/eth-key-to-wallet")
        self.client.get("/sui-key-to-address", params={"privateKey": self.sui_key}, name="/sui-key-to-address")

    @task(1)
    def generate(self):
        self.client.get("/generate-eth", name="/generate-eth")
        self.client.get("/generate-sui", name="/generate-sui")
