"""Sample workspace: login, password reset and MFA requirements."""

from ..models import ArtifactSet, Requirement, TestCase, Viewpoint


def sample_artifacts() -> ArtifactSet:
    """Seed artifact set with consistent two-way links.

    R-003 (MFA) is deliberately left uncovered.
    """
    requirements = [
        Requirement(
            id="R-001",
            description="User can log in with email and password",
            priority="High",
            linked_viewpoints=["VP-01"],
            linked_test_cases=["TC-01", "TC-02"],
        ),
        Requirement(
            id="R-002",
            description="Password reset via email link",
            priority="Medium",
            linked_viewpoints=["VP-02"],
            linked_test_cases=["TC-03"],
        ),
        Requirement(
            id="R-003",
            description="Multi-factor authentication setup",
            priority="High",
        ),
    ]
    viewpoints = [
        Viewpoint(
            id="VP-01",
            area="Login",
            intent="Validate login functionality with various credential combinations",
            data_variants="Valid/Invalid credentials, Empty fields, Special characters",
            notes="Focus on security and error handling",
            linked_requirements=["R-001"],
            linked_test_cases=["TC-01", "TC-02"],
        ),
        Viewpoint(
            id="VP-02",
            area="Password Reset",
            intent="Test password reset flow from initiation to completion",
            data_variants="Valid/Invalid emails, Expired links, Already used tokens",
            notes="Verify email delivery and link security",
            linked_requirements=["R-002"],
            linked_test_cases=["TC-03"],
        ),
    ]
    test_cases = [
        TestCase(
            id="TC-01",
            title="Valid login with email and password",
            steps=(
                "1. Open login page\n2. Enter valid email\n"
                "3. Enter valid password\n4. Click Login button"
            ),
            expected_result="User is logged in and redirected to dashboard",
            severity="High",
            req_ids=["R-001"],
            viewpoint_ids=["VP-01"],
            tags=["positive", "smoke"],
        ),
        TestCase(
            id="TC-02",
            title="Invalid password attempt",
            steps=(
                "1. Open login page\n2. Enter valid email\n"
                "3. Enter incorrect password\n4. Click Login button"
            ),
            expected_result="Error message displayed: 'Invalid credentials'",
            severity="Medium",
            req_ids=["R-001"],
            viewpoint_ids=["VP-01"],
            tags=["negative", "security"],
            locked=True,
        ),
        TestCase(
            id="TC-03",
            title="Password reset request with valid email",
            steps=(
                "1. Click 'Forgot Password' link\n2. Enter valid email address\n"
                "3. Click 'Reset Password' button"
            ),
            expected_result="Success message shown and reset email sent",
            severity="High",
            req_ids=["R-002"],
            viewpoint_ids=["VP-02"],
            tags=["positive", "functional"],
        ),
    ]
    return ArtifactSet(requirements=requirements, viewpoints=viewpoints, test_cases=test_cases)
