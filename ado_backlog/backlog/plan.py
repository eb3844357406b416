"""Predefined AWS infrastructure planning backlog.

Five epics, each with two issues, each issue with a single task. Items are
created in the order they appear here.
"""

from .models import BacklogEpic, BacklogIssue, BacklogTask

AWS_INFRASTRUCTURE_BACKLOG: tuple[BacklogEpic, ...] = (
    BacklogEpic(
        title="Networking Foundation",
        description=(
            "Design and provision the core AWS network: VPCs, subnets, routing "
            "and connectivity to on-premises environments."
        ),
        tags=("aws", "networking", "vpc"),
        issues=(
            BacklogIssue(
                title="Design multi-AZ VPC topology",
                description=(
                    "Define VPC layout across three availability zones with "
                    "public, private and isolated subnet tiers."
                ),
                tags=("vpc", "design"),
                tasks=(
                    BacklogTask(
                        title="Allocate CIDR ranges per environment",
                        description=(
                            "Reserve non-overlapping CIDR blocks for dev, staging "
                            "and production VPCs."
                        ),
                        tags=("ipam",),
                    ),
                ),
            ),
            BacklogIssue(
                title="Establish hybrid connectivity",
                description=(
                    "Connect AWS to the corporate network through Transit "
                    "Gateway and site-to-site VPN."
                ),
                tags=("transit-gateway", "vpn"),
                tasks=(
                    BacklogTask(
                        title="Provision NAT gateways and route tables",
                        description=(
                            "Create one NAT gateway per AZ and wire private "
                            "subnet routes through them."
                        ),
                    ),
                ),
            ),
        ),
    ),
    BacklogEpic(
        title="Identity and Access Management",
        description=(
            "Set up account structure, single sign-on and least-privilege "
            "access for people and workloads."
        ),
        tags=("aws", "iam", "security"),
        issues=(
            BacklogIssue(
                title="Configure AWS Organizations and landing zone",
                description=(
                    "Create organizational units and accounts for shared "
                    "services, workloads and security tooling."
                ),
                tags=("organizations", "control-tower"),
                tasks=(
                    BacklogTask(
                        title="Define service control policies",
                        description=(
                            "Restrict regions and deny disabling of CloudTrail "
                            "and GuardDuty at the OU level."
                        ),
                        tags=("scp",),
                    ),
                ),
            ),
            BacklogIssue(
                title="Implement role-based access",
                description=(
                    "Map team responsibilities to IAM Identity Center "
                    "permission sets and workload IAM roles."
                ),
                tags=("iam", "sso"),
                tasks=(
                    BacklogTask(
                        title="Create least-privilege permission sets",
                        description=(
                            "Author permission sets for administrators, "
                            "developers and read-only auditors."
                        ),
                        tags=("iam-identity-center",),
                    ),
                ),
            ),
        ),
    ),
    BacklogEpic(
        title="Compute and Container Platform",
        description=(
            "Provide the runtime platform for application workloads on EKS "
            "and EC2."
        ),
        tags=("aws", "compute", "eks"),
        issues=(
            BacklogIssue(
                title="Provision EKS cluster",
                description=(
                    "Stand up a managed Kubernetes cluster with private "
                    "endpoint access and IRSA enabled."
                ),
                tags=("eks", "kubernetes"),
                tasks=(
                    BacklogTask(
                        title="Define managed node groups",
                        description=(
                            "Size on-demand and spot node groups and configure "
                            "cluster autoscaler limits."
                        ),
                        tags=("autoscaling",),
                    ),
                ),
            ),
            BacklogIssue(
                title="Standardize EC2 workloads",
                description=(
                    "Build hardened AMIs and launch templates for workloads "
                    "that cannot run on containers."
                ),
                tags=("ec2",),
                tasks=(
                    BacklogTask(
                        title="Create launch templates and auto scaling groups",
                        description=(
                            "Use IMDSv2-only launch templates behind an "
                            "application load balancer."
                        ),
                    ),
                ),
            ),
        ),
    ),
    BacklogEpic(
        title="Data and Storage",
        description=(
            "Plan managed databases and object storage with backup, "
            "encryption and retention policies."
        ),
        tags=("aws", "data", "storage"),
        issues=(
            BacklogIssue(
                title="Deploy RDS PostgreSQL",
                description=(
                    "Provision a Multi-AZ PostgreSQL instance encrypted with a "
                    "customer managed KMS key."
                ),
                tags=("rds", "postgresql"),
                tasks=(
                    BacklogTask(
                        title="Configure automated backups and snapshots",
                        description=(
                            "Enable point-in-time recovery with 14-day retention "
                            "and cross-region snapshot copy."
                        ),
                        tags=("backup",),
                    ),
                ),
            ),
            BacklogIssue(
                title="Define S3 storage strategy",
                description=(
                    "Agree bucket naming, encryption defaults and public "
                    "access blocking for all accounts."
                ),
                tags=("s3",),
                tasks=(
                    BacklogTask(
                        title="Set S3 lifecycle policies",
                        description=(
                            "Transition objects to Infrequent Access after 30 "
                            "days and Glacier after 90 days."
                        ),
                        tags=("lifecycle", "cost"),
                    ),
                ),
            ),
        ),
    ),
    BacklogEpic(
        title="Observability and Cost Governance",
        description=(
            "Centralize logs, metrics and alerting, and keep spend visible "
            "and bounded."
        ),
        tags=("aws", "observability", "finops"),
        issues=(
            BacklogIssue(
                title="Set up CloudWatch monitoring",
                description=(
                    "Ship logs and metrics from all accounts to a central "
                    "monitoring account."
                ),
                tags=("cloudwatch", "monitoring"),
                tasks=(
                    BacklogTask(
                        title="Create alarms and dashboards",
                        description=(
                            "Alarm on error rates, latency and resource "
                            "saturation; route notifications through SNS."
                        ),
                        tags=("alerting",),
                    ),
                ),
            ),
            BacklogIssue(
                title="Establish cost governance",
                description=(
                    "Apply cost allocation tags and budget alerts per account "
                    "and environment."
                ),
                tags=("cost", "budgets"),
                tasks=(
                    BacklogTask(
                        title="Configure AWS Budgets and anomaly detection",
                        description=(
                            "Create monthly budgets with 80% and 100% alerts and "
                            "enable Cost Anomaly Detection."
                        ),
                    ),
                ),
            ),
        ),
    ),
)


def count_items(epics: tuple[BacklogEpic, ...]) -> tuple[int, int, int]:
    """Count epics, issues and tasks in a backlog."""
    issues = [issue for epic in epics for issue in epic.issues]
    tasks = [task for issue in issues for task in issue.tasks]
    return len(epics), len(issues), len(tasks)
