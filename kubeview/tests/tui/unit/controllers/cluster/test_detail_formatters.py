"""Tests for pod and service detail formatters."""

from __future__ import annotations

from kubeview.controllers.cluster.formatters import (
    PodDetailFormatter,
    ServiceDetailFormatter,
)

POD = {
    "metadata": {
        "name": "web-1",
        "namespace": "shop",
        "creationTimestamp": "2024-01-01T00:00:00Z",
        "labels": {"tier": "frontend", "app": "web"},
    },
    "spec": {
        "nodeName": "node-a",
        "containers": [
            {
                "name": "app",
                "image": "nginx:1.25",
                "resources": {"requests": {"cpu": "100m", "memory": "64Mi"}},
                "env": [
                    {"name": "MODE", "value": "prod"},
                    {
                        "name": "DB_HOST",
                        "valueFrom": {"configMapKeyRef": {"name": "db", "key": "host"}},
                    },
                    {
                        "name": "POD_IP",
                        "valueFrom": {"fieldRef": {"fieldPath": "status.podIP"}},
                    },
                ],
            }
        ],
        "volumes": [
            {"name": "data", "persistentVolumeClaim": {"claimName": "web-data"}},
            {"name": "scratch", "emptyDir": {}},
        ],
    },
    "status": {
        "phase": "Running",
        "podIP": "10.1.2.3",
        "containerStatuses": [
            {
                "name": "app",
                "ready": True,
                "restartCount": 0,
                "state": {"running": {"startedAt": "2024-01-01T00:01:00Z"}},
            }
        ],
    },
}


class TestPodDetailFormatter:
    """Tests for PodDetailFormatter."""

    def test_header_fields(self) -> None:
        text = PodDetailFormatter().format(POD)
        assert text.startswith("Pod: web-1\nNamespace: shop\nStatus: Running\n")
        assert "IP: 10.1.2.3" in text
        assert "Node: node-a" in text
        assert "Created: 2024-01-01T00:00:00Z" in text

    def test_labels_are_sorted(self) -> None:
        text = PodDetailFormatter().format(POD)
        assert text.index("  app: web") < text.index("  tier: frontend")

    def test_containers_section(self) -> None:
        text = PodDetailFormatter().format(POD)
        assert "  - app (Image: nginx:1.25)" in text
        assert "      CPU Request: 100m" in text
        assert "      Memory Request: 64Mi" in text
        assert "CPU Limit" not in text
        assert "      Ready: true" in text
        assert "      State: Running (started at 2024-01-01T00:01:00Z)" in text

    def test_environment_sources(self) -> None:
        text = PodDetailFormatter().format(POD)
        assert "    - MODE: prod" in text
        assert "    - DB_HOST: [from ConfigMap db (key: host)]" in text
        assert "    - POD_IP: [from Field status.podIP]" in text

    def test_volumes_and_hint(self) -> None:
        text = PodDetailFormatter().format(POD)
        assert "    Claim Name: web-data" in text
        assert "    Type: EmptyDir" in text
        assert text.endswith("Use 'kubectl describe pod' for events and additional information\n")

    def test_waiting_state_with_message(self) -> None:
        pod = {
            "metadata": {"name": "x"},
            "spec": {"containers": [{"name": "c"}]},
            "status": {
                "containerStatuses": [
                    {
                        "name": "c",
                        "state": {"waiting": {"reason": "ErrImagePull", "message": "not found"}},
                    }
                ]
            },
        }
        text = PodDetailFormatter().format(pod)
        assert "      State: Waiting (reason: ErrImagePull)" in text
        assert "      Message: not found" in text
        assert "    No environment variables defined" in text


class TestServiceDetailFormatter:
    """Tests for ServiceDetailFormatter."""

    def test_full_service(self) -> None:
        service = {
            "metadata": {
                "name": "web",
                "namespace": "shop",
                "labels": {"app": "web"},
                "annotations": {"team": "storefront"},
                "creationTimestamp": "2024-01-01T00:00:00Z",
            },
            "spec": {
                "type": "LoadBalancer",
                "clusterIP": "10.96.0.5",
                "sessionAffinity": "None",
                "selector": {"app": "web"},
                "ports": [{"name": "http", "port": 80, "nodePort": 31000, "protocol": "TCP"}],
            },
            "status": {"loadBalancer": {"ingress": [{"ip": "34.1.1.1"}]}},
        }
        text = ServiceDetailFormatter().format(service)
        assert text.startswith("Service: web\nNamespace: shop\nType: LoadBalancer\n")
        assert "External IP: 34.1.1.1" in text
        assert "  - 80:31000/TCP (name: http)" in text
        assert "Session Affinity: None" in text
        assert "Annotations:\n  team: storefront" in text
        assert text.endswith("Created: 2024-01-01T00:00:00Z\n")

    def test_empty_service(self) -> None:
        text = ServiceDetailFormatter().format({"metadata": {"name": "headless"}})
        assert "  No ports defined" in text
        assert "  No selector defined" in text
        assert "Labels:" not in text
