from email_templates import render_admission_inquiry, render_contact_inquiry
from schemas import AdmissionInquiry, ContactInquiry


def test_contact_subject_and_body():
    subject, html = render_contact_inquiry(
        ContactInquiry(childName="Ravi", phone="9999999999", message="Interested in Class 1")
    )

    assert subject == "📩 New Contact Inquiry: Ravi"
    assert "Ravi" in html
    assert "Interested in Class 1" in html
    assert 'href="tel:9999999999"' in html


def test_contact_missing_admission_class_shows_dash():
    _, html = render_contact_inquiry(ContactInquiry(childName="Ravi", phone="1", message="hi"))
    assert "Admission Class" in html
    assert ">-</td>" in html


def test_admission_subject_has_name_and_class():
    subject, html = render_admission_inquiry(
        AdmissionInquiry(studentName="Asha", admissionClass="Nursery", dob="2021-04-02", phone="888")
    )

    assert subject == "🎓 New Admission Inquiry: Asha (Nursery)"
    assert "2021-04-02" in html
    assert "official school website" in html
    # lastSchool and address both default to "-"
    assert html.count(">-</td>") == 2


def test_admission_optional_fields_rendered():
    _, html = render_admission_inquiry(
        AdmissionInquiry(
            studentName="Asha",
            admissionClass="Nursery",
            dob="2021-04-02",
            phone="888",
            lastSchool="Little Stars",
            address="12 MG Road",
        )
    )
    assert "Little Stars" in html
    assert "12 MG Road" in html


def test_submitted_values_are_escaped():
    _, html = render_contact_inquiry(
        ContactInquiry(childName="<b>Ravi</b>", phone="1", message='<script>alert("x")</script>')
    )

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;b&gt;Ravi&lt;/b&gt;" in html
