"""Phone number validation and normalization utilities."""


class PhoneNumberValidator:
    """Utility class for phone number validation and normalization."""

    @staticmethod
    def normalize(phone_number) -> str:
        """
        Reduce a phone number to the digits the Graph API expects.

        Spaces, dashes and a single leading ``+`` are tolerated.

        Args:
            phone_number: Phone number in any common format

        Returns:
            Digits only

        Raises:
            ValueError: If anything other than digits remains
        """
        if isinstance(phone_number, int) and not isinstance(phone_number, bool):
            phone_number = str(phone_number)
        if not isinstance(phone_number, str):
            raise ValueError(f"Invalid phone number format: {phone_number!r}")

        cleaned = phone_number.strip().replace(" ", "").replace("-", "")
        digits = cleaned[1:] if cleaned.startswith("+") else cleaned

        if not digits.isdigit():
            raise ValueError(f"Invalid phone number format: {phone_number}")

        return digits
