"""
General Email Template

Wraps the message body in the standard Outlook-style layout with the
signature, logo and contact/notice block.
"""

GENERAL_TEMPLATE = """
    <html><head></head><body><div>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><SPAN style="mso-ascii-font-family: Calibri; mso-ascii-theme-font: minor-latin; mso-hansi-font-family: Calibri; mso-hansi-theme-font: minor-latin; mso-bidi-font-family: 'Times New Roman'; mso-bidi-theme-font: minor-bidi;FONT-SIZE: 12pt"><FONT face=Calibri>{body}<o:p></o:p></FONT></SPAN></P>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><SPAN style="mso-ascii-font-family: Calibri; mso-ascii-theme-font: minor-latin; mso-hansi-font-family: Calibri; mso-hansi-theme-font: minor-latin; mso-bidi-font-family: 'Times New Roman'; mso-bidi-theme-font: minor-bidi"><o:p><FONT face=Calibri>&nbsp;</FONT></o:p></SPAN></P>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><SPAN style="mso-ascii-font-family: Calibri; mso-ascii-theme-font: minor-latin; mso-hansi-font-family: Calibri; mso-hansi-theme-font: minor-latin; mso-bidi-font-family: 'Times New Roman'; mso-bidi-theme-font: minor-bidi"><o:p><FONT face=Calibri>&nbsp;</FONT></o:p></SPAN></P>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><SPAN style="mso-ascii-font-family: Calibri; mso-ascii-theme-font: minor-latin; mso-hansi-font-family: Calibri; mso-hansi-theme-font: minor-latin; mso-bidi-font-family: 'Times New Roman'; mso-bidi-theme-font: minor-bidi;FONT-SIZE: 12pt"><FONT face=Calibri>{sign}<o:p></o:p></FONT></SPAN></P>
<br/>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><B style="mso-bidi-font-weight: normal"><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: black; FONT-SIZE: 10pt; mso-no-proof: yes"></SPAN></B><img src="{logo}" />
<br/>
<B><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #636363; FONT-SIZE: 10pt; mso-fareast-language: EN-AU"><BR></SPAN></B><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #ff6600; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">•</SPAN><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #bfd630; FONT-SIZE: 10pt; mso-fareast-language: EN-AU"> </SPAN><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #636363; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">t. 08 7111 0680 </SPAN><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #ff6600; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">•</SPAN><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #636363; FONT-SIZE: 10pt; mso-fareast-language: EN-AU"> f. 08 8331 7742 <o:p></o:p></SPAN></P>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #ff6600; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">• </SPAN><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #636363; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">PO Box 569, <o:p></o:p></SPAN></P>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #636363; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">&nbsp;&nbsp;NORTH ADELAIDE SA 5006<o:p></o:p></SPAN></P>
<br/>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><B><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #ff6600; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">Confidentiality</SPAN></B><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #ff6600; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">: <o:p></o:p></SPAN></P>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><B><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: black; FONT-SIZE: 10pt; mso-fareast-language: EN-AU"><o:p>&nbsp;</o:p></SPAN></B></P>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><B><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #ff6600; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">Viruses</SPAN></B><SPAN style="FONT-FAMILY: 'Helvetica','sans-serif'; COLOR: #ff6600; FONT-SIZE: 10pt; mso-fareast-language: EN-AU">: <o:p></o:p></SPAN></P>
<P style="MARGIN: 0cm 0cm 0pt" class=MsoNormal><SPAN style="mso-ascii-font-family: Calibri; mso-ascii-theme-font: minor-latin; mso-hansi-font-family: Calibri; mso-hansi-theme-font: minor-latin; mso-bidi-font-family: 'Times New Roman'; mso-bidi-theme-font: minor-bidi; mso-ansi-language: EN-US" lang=EN-US><o:p><FONT face=Calibri>&nbsp;</FONT></o:p></SPAN></P>
</div></body></html>
"""


def render_general_template(body: str, sign: str, logo: str) -> str:
    """
    Render the general email layout.
    
    Values are inserted verbatim, without HTML escaping; callers are trusted
    to supply markup.
    
    Args:
        body: Message body (plain text or HTML fragment)
        sign: Signature text
        logo: Logo image URL
        
    Returns:
        Complete HTML document
    """
    return GENERAL_TEMPLATE.format(body=body, sign=sign, logo=logo)
