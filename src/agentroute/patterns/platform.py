"""Platform engineer patterns: IaC, Kubernetes, cloud infrastructure, GitOps.

Checked after tooling, so a prompt naming both a bundler config and a
Helm chart goes to the tooling engineer.
"""

from __future__ import annotations

from agentroute.patterns.models import IntentPattern, intent

PLATFORM_INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    intent(r"terraform", 0.95, "Terraform"),
    intent(r"pulumi", 0.95, "Pulumi"),
    intent(r"aws.?cdk", 0.95, "AWS CDK"),
    intent(r"helm", 0.95, "Helm chart"),
    intent(r"argocd|argo.?cd", 0.95, "Argo CD"),
    intent(r"flux.?cd|fluxcd", 0.95, "Flux CD"),
    intent(r"kubernetes|k8s", 0.9, "Kubernetes"),
    intent(r"kustomize|kustomization", 0.95, "Kustomize"),
    intent(r"kubectl|kubeconfig", 0.9, "Kubectl"),
    intent(r"k8s.*manifest|manifest.*k8s|kubernetes.*manifest", 0.9, "K8s manifest"),
    intent(r"EKS|GKE|AKS", 0.9, "Managed Kubernetes"),
    intent(r"IRSA|workload.?identity", 0.9, "Workload identity"),
    intent(r"인프라\s*(코드|설정|관리|자동화)", 0.85, "Korean: infrastructure"),
    intent(r"infrastructure.?as.?code|IaC", 0.9, "Infrastructure as Code"),
    intent(r"gitops", 0.9, "GitOps"),
    intent(r"multi.?cloud|hybrid.?cloud", 0.85, "Multi-cloud"),
    intent(r"finops|cloud.?cost|비용\s*최적화", 0.85, "Cloud cost optimization"),
    intent(r"disaster.?recovery|RTO|RPO", 0.85, "Disaster recovery"),
)
